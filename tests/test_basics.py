"""Basic unit tests for the weatherdash package."""

from weatherdash import (
    ApplicationError,
    AsyncWeatherDash,
    ClientSideError,
    ConfigError,
    ErrorKind,
    NetworkError,
    ServerError,
    WeatherDash,
    WeatherDashError,
    __version__,
)
from weatherdash.errors import GENERIC_NETWORK_ERROR, GENERIC_REQUEST_FAILED, GENERIC_SERVER_ERROR


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert WeatherDash is not None
    assert AsyncWeatherDash is not None


def test_error_hierarchy():
    for cls in (ApplicationError, ServerError, NetworkError, ClientSideError, ConfigError):
        assert issubclass(cls, WeatherDashError)


def test_error_kinds():
    assert ApplicationError("x").kind is ErrorKind.APPLICATION
    assert ServerError("x").kind is ErrorKind.SERVER
    assert NetworkError().kind is ErrorKind.NETWORK
    assert ClientSideError().kind is ErrorKind.CLIENT
    assert ConfigError("bad").kind is None


def test_error_attributes():
    err = WeatherDashError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.message == "something broke"
    assert err.details is None

    app = ApplicationError("city not found", envelope_code=1)
    assert app.code == "application_error"
    assert app.envelope_code == 1
    assert str(app) == "city not found"

    srv = ServerError(None, status_code=502, details={"path": "/api/health"})
    assert srv.status_code == 502
    assert srv.details == {"path": "/api/health"}


def test_generic_fallbacks():
    assert ApplicationError(None).message == GENERIC_REQUEST_FAILED
    assert ApplicationError("").message == GENERIC_REQUEST_FAILED
    assert ServerError("").message == GENERIC_SERVER_ERROR
    assert NetworkError().message == GENERIC_NETWORK_ERROR
    assert ClientSideError().message == GENERIC_REQUEST_FAILED
