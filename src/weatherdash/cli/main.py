"""
weatherdash CLI — `weatherdash` command.

Commands:
  weatherdash health                   Backend liveness
  weatherdash weather CITY --lat --lon Current conditions, forecasts, alerts
  weatherdash search KEYWORD           City search
  weatherdash prefs show|set           Preferences
  weatherdash favorites list|add|remove
  weatherdash ask QUESTION             Ask the AI assistant
  weatherdash config show|set          Saved CLI settings
"""

import asyncio
import logging
from typing import Optional

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install weatherdash[cli]")

from weatherdash.client import AsyncWeatherDash
from weatherdash.config import load_settings
from weatherdash.errors import ConfigError, WeatherDashError
from weatherdash.notify import ConsoleNotifier

console = Console()


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _get_client() -> AsyncWeatherDash:
    settings = click.get_current_context().find_root().obj["settings"]
    return AsyncWeatherDash(settings=settings, notifier=ConsoleNotifier(Console(stderr=True)))


def _run(coro):
    try:
        return asyncio.run(coro)
    except ConfigError as e:
        raise click.ClickException(e.message)
    except WeatherDashError:
        # already shown by the notifier
        raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("--base-url", default=None, help="Backend base URL")
@click.option("--timeout-ms", default=None, type=click.IntRange(min=1), help="Request timeout in milliseconds")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def main(ctx: click.Context, base_url: Optional[str], timeout_ms: Optional[int], verbose: bool):
    """Weather dashboard backend from the terminal."""
    try:
        settings = load_settings(base_url=base_url, timeout_ms=timeout_ms)
    except ConfigError as e:
        raise click.ClickException(e.message)
    ctx.obj = {"settings": settings}
    setup_logging("DEBUG" if verbose else settings.log_level)


# Register subcommands from separate modules
from weatherdash.cli.weather import health_cmd, search_cmd, weather_cmd
from weatherdash.cli.prefs import prefs
from weatherdash.cli.favorites import favorites
from weatherdash.cli.ask import ask_cmd
from weatherdash.cli.config import config_group

main.add_command(health_cmd)
main.add_command(weather_cmd)
main.add_command(search_cmd)
main.add_command(prefs)
main.add_command(favorites)
main.add_command(ask_cmd)
main.add_command(config_group)


if __name__ == "__main__":
    main()
