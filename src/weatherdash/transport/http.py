"""
Envelope transport over httpx — every backend call goes through `HttpClient.send`.

`request` performs the call and raises a classified WeatherDashError; `send`
wraps it and hands each failure to the injected notifier exactly once.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from weatherdash.errors import (
    ClientSideError,
    NetworkError,
    ServerError,
    WeatherDashError,
)
from weatherdash.notify import LoggingNotifier, Notifier
from weatherdash.transport.envelope import parse_envelope, unwrap, validate_data

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_MS = 30_000

# Raised before anything left the process.
_NOT_DISPATCHED = (httpx.UnsupportedProtocol, httpx.LocalProtocolError, httpx.InvalidURL)


def classify(exc: BaseException) -> WeatherDashError:
    """Map any failure raised while sending into one of the four error kinds."""
    if isinstance(exc, WeatherDashError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        return ServerError(_error_body_message(exc.response), status_code=exc.response.status_code)
    if isinstance(exc, _NOT_DISPATCHED):
        return ClientSideError(details={"reason": str(exc)})
    if isinstance(exc, httpx.TransportError):
        return NetworkError(details={"reason": str(exc) or type(exc).__name__})
    return ClientSideError(details={"reason": str(exc) or type(exc).__name__})


def _error_body_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError, httpx.ResponseNotRead):
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return None


def _clean_params(params: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None}


def _encode_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        notifier: Optional[Notifier] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout_ms = timeout_ms
        self.notifier: Notifier = notifier or LoggingNotifier()
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": "weatherdash/0.1.0", "Accept": "application/json"},
            timeout=timeout_ms / 1000.0,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
        response_model: Any = None,
    ) -> Any:
        """Perform one call and return the envelope's `data`. Raises a classified error; never notifies."""
        logger.debug("%s %s params=%s", method, path, params)
        try:
            # httpx applies its timeout per phase; wait_for caps the whole call.
            resp = await asyncio.wait_for(
                self._client.request(
                    method,
                    path,
                    params=_clean_params(params),
                    json=_encode_body(body),
                    headers={"Content-Type": "application/json"},
                ),
                timeout=self._timeout_ms / 1000.0,
            )
            resp.raise_for_status()
        except asyncio.TimeoutError as e:
            raise NetworkError(details={"reason": f"no response within {self._timeout_ms} ms"}) from e
        except Exception as e:
            raise classify(e) from e

        try:
            raw = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ServerError("Server returned an unexpected response", status_code=resp.status_code) from e

        data = unwrap(parse_envelope(raw, status_code=resp.status_code))
        return validate_data(data, response_model)

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
        response_model: Any = None,
    ) -> Any:
        try:
            return await self.request(method, path, params=params, body=body, response_model=response_model)
        except WeatherDashError as e:
            logger.debug("%s %s failed (%s): %s", method, path, e.kind.value if e.kind else e.code, e.message)
            self.notifier.notify(e)
            raise

    async def get(self, path: str, params: Optional[dict[str, Any]] = None, response_model: Any = None) -> Any:
        return await self.send("GET", path, params=params, response_model=response_model)

    async def post(self, path: str, body: Any = None, response_model: Any = None) -> Any:
        return await self.send("POST", path, body=body, response_model=response_model)

    async def put(self, path: str, body: Any = None, response_model: Any = None) -> Any:
        return await self.send("PUT", path, body=body, response_model=response_model)

    async def delete(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.send("DELETE", path, params=params)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
