"""CLI: weatherdash config show|set"""

import json

import click
from rich.console import Console

from weatherdash import config as settings_file
from weatherdash.errors import ConfigError

console = Console()


@click.group("config")
def config_group():
    """Saved CLI settings (~/.weatherdash/config.json)."""


@config_group.command("show")
def config_show():
    """Show the effective settings."""
    settings = click.get_current_context().find_root().obj["settings"]
    click.echo(json.dumps(settings.model_dump(), indent=2))


@config_group.command("set")
@click.argument("assignments", nargs=-1, required=True)
def config_set(assignments):
    """Save settings, e.g. `config set base_url=http://10.0.0.5:8080 timeout_ms=10000`."""
    changes = {}
    for pair in assignments:
        if "=" not in pair:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}")
        key, value = pair.split("=", 1)
        changes[key] = value
    try:
        saved = settings_file.update_config_file(changes)
    except ConfigError as e:
        raise click.ClickException(e.message)
    console.print(f"[green]Saved to {settings_file.CONFIG_FILE}[/green]")
    click.echo(json.dumps(saved, indent=2))
