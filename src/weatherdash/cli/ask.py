"""CLI: weatherdash ask"""

from typing import Optional

import click
from rich.console import Console

from weatherdash.models.city import CityDTO

console = Console()


def _get_client():
    from weatherdash.cli.main import _get_client
    return _get_client()


def _run(coro):
    from weatherdash.cli.main import _run
    return _run(coro)


@click.command("ask")
@click.argument("question")
@click.option("--city", default=None, help="City the question is about (defaults to Beijing)")
@click.option("--country", default="")
@click.option("--lat", default=None, type=float)
@click.option("--lon", default=None, type=float)
def ask_cmd(question: str, city: Optional[str], country: str, lat: Optional[float], lon: Optional[float]):
    """Ask the AI assistant a question about the weather."""
    if city and (lat is None or lon is None):
        raise click.UsageError("--city needs --lat and --lon")

    async def _ask():
        async with _get_client() as client:
            if city:
                client.state.city.set_current_city(
                    CityDTO(name=city, country=country, lat=lat, lon=lon)
                )
            with console.status("Thinking..."):
                answer = await client.ask(question)
        console.print(f"[green]Assistant:[/green] {answer.content}")

    _run(_ask())
