"""CLI: weatherdash prefs show|set"""

import json

import click
from pydantic import ValidationError
from pydantic.alias_generators import to_camel
from rich.console import Console

from weatherdash.models.preference import PreferenceDTO

console = Console()


def _get_client():
    from weatherdash.cli.main import _get_client
    return _get_client()


def _run(coro):
    from weatherdash.cli.main import _run
    return _run(coro)


def _parse_assignment(pair: str) -> tuple[str, object]:
    if "=" not in pair:
        raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}")
    key, value = pair.split("=", 1)
    if value.lower() in ("true", "false"):
        return key, value.lower() == "true"
    return key, value


def _wire_key(key: str) -> str:
    """Accept either the wire name (showLineChart) or the Python name (show_line_chart)."""
    for name in PreferenceDTO.model_fields:
        if name != "id" and key in (name, to_camel(name)):
            return to_camel(name)
    raise click.BadParameter(f"unknown preference {key!r}", param_hint="ASSIGNMENTS")


@click.group()
def prefs():
    """Preference commands."""


@prefs.command("show")
def prefs_show():
    """Show the stored preferences."""

    async def _show():
        async with _get_client() as client:
            current = await client.load_preferences()
        click.echo(json.dumps(current.to_wire(), indent=2, ensure_ascii=False))

    _run(_show())


@prefs.command("set")
@click.argument("assignments", nargs=-1, required=True)
def prefs_set(assignments):
    """Change preferences, e.g. `prefs set temperatureUnit=F showLineChart=false`.

    The backend replaces the whole record, so the current copy is read first and
    sent back with the changes applied.
    """
    changes = {_wire_key(k): v for k, v in (_parse_assignment(a) for a in assignments)}

    async def _set():
        async with _get_client() as client:
            current = await client.load_preferences()
            try:
                merged = PreferenceDTO.model_validate({**current.to_wire(), **changes})
            except ValidationError as e:
                raise click.BadParameter(str(e), param_hint="ASSIGNMENTS")
            saved = await client.save_preferences(merged)
        console.print("[green]Preferences saved.[/green]")
        click.echo(json.dumps(saved.to_wire(), indent=2, ensure_ascii=False))

    _run(_set())
