"""
weatherdash — data access and state layer for a weather dashboard.

Async REST client for the weather dashboard backend, typed models for its
responses, and the reactive stores UI code observes.
"""

from weatherdash.client import AsyncWeatherDash, WeatherDash
from weatherdash.config import Settings, load_settings
from weatherdash.errors import (
    ApplicationError,
    ClientSideError,
    ConfigError,
    ErrorKind,
    NetworkError,
    ServerError,
    WeatherDashError,
)
from weatherdash.notify import ConsoleNotifier, LoggingNotifier, Notifier, NullNotifier
from weatherdash.stores.state import AppState
from weatherdash.transport.http import HttpClient

__version__ = "0.1.0"
__all__ = [
    "AsyncWeatherDash",
    "WeatherDash",
    "Settings",
    "load_settings",
    "HttpClient",
    "AppState",
    "Notifier",
    "LoggingNotifier",
    "ConsoleNotifier",
    "NullNotifier",
    "ErrorKind",
    "WeatherDashError",
    "ApplicationError",
    "ServerError",
    "NetworkError",
    "ClientSideError",
    "ConfigError",
]
