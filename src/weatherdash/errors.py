"""
Error types, one exception class per failure kind.
"""

from enum import Enum
from typing import Any, Optional

GENERIC_REQUEST_FAILED = "Request failed"
GENERIC_SERVER_ERROR = "Server error"
GENERIC_NETWORK_ERROR = "Network error, please check your network connection"


class ErrorKind(str, Enum):
    APPLICATION = "application"
    SERVER = "server"
    NETWORK = "network"
    CLIENT = "client"


class WeatherDashError(Exception):
    kind: Optional[ErrorKind] = None

    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ApplicationError(WeatherDashError):
    """Envelope came back with a non-zero code."""

    kind = ErrorKind.APPLICATION

    def __init__(self, message: Optional[str], envelope_code: int = -1, details: Optional[dict[str, Any]] = None):
        super().__init__("application_error", message or GENERIC_REQUEST_FAILED, details)
        self.envelope_code = envelope_code


class ServerError(WeatherDashError):
    """Server answered, but not with a usable envelope."""

    kind = ErrorKind.SERVER

    def __init__(self, message: Optional[str], status_code: Optional[int] = None,
                 details: Optional[dict[str, Any]] = None):
        super().__init__("server_error", message or GENERIC_SERVER_ERROR, details)
        self.status_code = status_code


class NetworkError(WeatherDashError):
    """No response was received (connection failure, timeout)."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str = GENERIC_NETWORK_ERROR, details: Optional[dict[str, Any]] = None):
        super().__init__("network_error", message, details)


class ClientSideError(WeatherDashError):
    """The request could not be built or dispatched."""

    kind = ErrorKind.CLIENT

    def __init__(self, message: str = GENERIC_REQUEST_FAILED, details: Optional[dict[str, Any]] = None):
        super().__init__("client_error", message, details)


class ConfigError(WeatherDashError):
    def __init__(self, message: str):
        super().__init__("config_error", message)
