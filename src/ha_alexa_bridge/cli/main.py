"""
ha-alexa-bridge CLI.

Commands:
  ha-alexa-bridge send <file>   Forward a directive JSON file, print the response
  ha-alexa-bridge config        Show the effective configuration
"""

import json
import sys
from typing import Any, Optional

try:
    import click
    from rich.console import Console
    from rich.table import Table
except ImportError:
    raise SystemExit("CLI requires extras: pip install ha-alexa-bridge[cli]")

from pydantic import ValidationError

from ha_alexa_bridge.bridge import Bridge
from ha_alexa_bridge.config import BridgeConfig
from ha_alexa_bridge.log import configure_logging
from ha_alexa_bridge.transport.envelope import is_error_response

console = Console()


def _load_config(**overrides: Any) -> BridgeConfig:
    updates = {k: v for k, v in overrides.items() if v is not None}
    try:
        config = BridgeConfig.from_env()
        if not updates:
            return config
        return BridgeConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise click.UsageError(f"invalid configuration: {e}")


@click.group()
@click.version_option("0.1.0")
def main():
    """Forward Alexa Smart Home directives to Home Assistant."""


@main.command("send")
@click.argument("directive_file", type=click.File("r"))
@click.option("--base-url", default=None, help="Home Assistant URL (overrides BASE_URL)")
@click.option("--timeout", type=float, default=None, help="Outbound timeout in seconds")
@click.option("--debug/--no-debug", default=None, help="Log directive preview, headers and latency")
def send_cmd(directive_file, base_url: Optional[str], timeout: Optional[float], debug: Optional[bool]):
    """Forward a directive (file path or - for stdin) and print the response."""
    try:
        directive = json.load(directive_file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="DIRECTIVE_FILE")

    config = _load_config(base_url=base_url, timeout=timeout, debug=debug)
    # stdout carries the response document
    configure_logging(config.effective_log_level, stream=sys.stderr)

    bridge = Bridge(config)
    try:
        response = bridge.handle(directive)
    finally:
        bridge.close()

    click.echo(json.dumps(response, indent=2))
    if is_error_response(response):
        raise SystemExit(1)


@main.command("config")
def config_cmd():
    """Show the effective configuration (fallback token redacted)."""
    config = _load_config()
    table = Table(title="ha-alexa-bridge")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in config.redacted().items():
        table.add_row(key, str(value))
    console.print(table)
    if config.debug and config.fallback_token and not config.fallback_enabled:
        console.print("[yellow]DEBUG is on but the fallback token is ignored in production.[/yellow]")


if __name__ == "__main__":
    main()
