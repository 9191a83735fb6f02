"""CLI: weatherdash health|weather|search"""

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


@click.command("health")
def health_cmd():
    """Check that the backend is up."""

    async def _health():
        async with _get_client() as client:
            status = await client.health()
        console.print(f"[green]{status.service}[/green] {status.version}: {status.status}")

    _run(_health())


@click.command("weather")
@click.argument("city")
@click.option("--lat", required=True, type=float)
@click.option("--lon", required=True, type=float)
@click.option("--country", default="")
@click.option("--json-output", "--json", is_flag=True)
def weather_cmd(city, lat, lon, country, json_output):
    """Show current weather, forecasts and alerts for a city."""

    async def _weather():
        async with _get_client() as client:
            await client.refresh_weather(CityDTO(name=city, country=country, lat=lat, lon=lon))
            w = client.state.weather
            if json_output:
                click.echo(json.dumps({
                    "current": w.current_weather.to_wire() if w.current_weather else None,
                    "hourly": [h.to_wire() for h in w.hourly_forecast],
                    "daily": [d.to_wire() for d in w.daily_forecast],
                    "alerts": [a.to_wire() for a in w.alerts],
                    "error": w.error,
                }, indent=2, ensure_ascii=False))
                return w.error is None
            if w.current_weather:
                cur = w.current_weather
                console.print(
                    f"[bold]{cur.city}[/bold] {cur.temp:.1f}° {cur.description}, "
                    f"wind {cur.wind_speed:.1f} m/s, humidity {cur.humidity}%"
                )
                if cur.has_extended and cur.extended.wind_dir:
                    console.print(f"[dim]{cur.extended.wind_dir} {cur.extended.wind_scale or ''}[/dim]")
            if w.daily_forecast:
                table = Table(title="Daily forecast")
                table.add_column("Date", style="bold")
                table.add_column("Min")
                table.add_column("Max")
                table.add_column("Weather")
                for d in w.daily_forecast:
                    table.add_row(d.date.isoformat(), f"{d.temp_min:.1f}", f"{d.temp_max:.1f}", d.description)
                console.print(table)
            for alert in w.alerts:
                console.print(f"[yellow]{alert.level or 'alert'}:[/yellow] {alert.event}: {alert.description}")
            return w.error is None

    if not _run(_weather()):
        raise SystemExit(1)


@click.command("search")
@click.argument("keyword")
@click.option("--json-output", "--json", is_flag=True)
def search_cmd(keyword, json_output):
    """Search cities by keyword."""

    async def _search():
        async with _get_client() as client:
            cities = await client.search_cities(keyword)
        if json_output:
            click.echo(json.dumps([c.to_wire() for c in cities], indent=2, ensure_ascii=False))
            return
        table = Table(title=f"Cities matching {keyword!r}")
        table.add_column("Name", style="bold")
        table.add_column("Country")
        table.add_column("State")
        table.add_column("Lat")
        table.add_column("Lon")
        for c in cities:
            table.add_row(c.name, c.country, c.state or "", str(c.lat), str(c.lon))
        console.print(table)

    _run(_search())
