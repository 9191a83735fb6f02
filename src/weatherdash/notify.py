"""
Notifier capability. It decides nothing; it only surfaces an already-classified error.

The transport calls `notify` exactly once per failed call; how the message is
rendered is up to the implementation that gets injected.
"""

import logging
from typing import Optional, Protocol

from weatherdash.errors import WeatherDashError

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, error: WeatherDashError) -> None: ...


class LoggingNotifier:
    """Default notifier: writes the user-facing message to the log."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def notify(self, error: WeatherDashError) -> None:
        kind = error.kind.value if error.kind else "unknown"
        self._log.error("[%s] %s", kind, error.message)


class ConsoleNotifier:
    """Prints the message in red on a rich console (CLI)."""

    def __init__(self, console=None):
        from rich.console import Console
        self._console = console or Console(stderr=True)

    def notify(self, error: WeatherDashError) -> None:
        self._console.print(f"[red]{error.message}[/red]")


class NullNotifier:
    def notify(self, error: WeatherDashError) -> None:
        pass
