"""CLI: weatherdash favorites list|add|remove"""

import json

import click
from rich.console import Console
from rich.table import Table

from weatherdash.models.city import CityDTO

console = Console()


def _get_client():
    from weatherdash.cli.main import _get_client
    return _get_client()


def _run(coro):
    from weatherdash.cli.main import _run
    return _run(coro)


def _city_options(fn):
    fn = click.option("--lon", required=True, type=float)(fn)
    fn = click.option("--lat", required=True, type=float)(fn)
    fn = click.option("--country", required=True)(fn)
    return click.argument("name")(fn)


@click.group()
def favorites():
    """Favorite cities."""


@favorites.command("list")
@click.option("--json-output", "--json", is_flag=True)
def favorites_list(json_output):
    """List favorite cities."""

    async def _list():
        async with _get_client() as client:
            cities = await client.load_favorites()
        if json_output:
            click.echo(json.dumps([c.to_wire() for c in cities], indent=2, ensure_ascii=False))
            return
        table = Table(title=f"Favorites ({len(cities)})")
        table.add_column("Name", style="bold")
        table.add_column("Country")
        table.add_column("Lat")
        table.add_column("Lon")
        for c in cities:
            table.add_row(c.name, c.country, str(c.lat), str(c.lon))
        console.print(table)

    _run(_list())


@favorites.command("add")
@_city_options
@click.option("--state", default=None)
def favorites_add(name, country, lat, lon, state):
    """Add a favorite city."""

    async def _add():
        async with _get_client() as client:
            created = await client.add_favorite(CityDTO(name=name, country=country, state=state, lat=lat, lon=lon))
        console.print(f"[green]Added {created.name}, {created.country}.[/green]")

    _run(_add())


@favorites.command("remove")
@_city_options
def favorites_remove(name, country, lat, lon):
    """Remove a favorite city."""

    async def _remove():
        async with _get_client() as client:
            await client.remove_favorite(CityDTO(name=name, country=country, lat=lat, lon=lon))
        console.print(f"[green]Removed {name}, {country}.[/green]")

    _run(_remove())
