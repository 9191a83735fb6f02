"""
Turns a decoded response body into `data` or a classified error.
"""

from typing import Any, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from weatherdash.errors import ApplicationError, ServerError
from weatherdash.models.envelope import Envelope

T = TypeVar("T")


def parse_envelope(raw: Any, status_code: Optional[int] = None) -> Envelope:
    """Validate the wrapper shape. Anything else from a 2xx is a server fault."""
    try:
        return Envelope.model_validate(raw)
    except ValidationError as e:
        raise ServerError(
            "Server returned an unexpected response",
            status_code=status_code,
            details={"errors": e.errors(include_url=False)},
        ) from e


def unwrap(envelope: Envelope) -> Any:
    """Return `data` for code 0; raise ApplicationError with the envelope message otherwise."""
    if envelope.ok:
        return envelope.data
    raise ApplicationError(envelope.message, envelope_code=envelope.code)


def validate_data(data: Any, response_model: Any) -> Any:
    """Coerce `data` into the expected schema, failing fast on partial provider payloads."""
    if response_model is None:
        return data
    try:
        return TypeAdapter(response_model).validate_python(data)
    except ValidationError as e:
        raise ServerError(
            f"Server response did not match {_schema_name(response_model)}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def _schema_name(response_model: Any) -> str:
    return getattr(response_model, "__name__", None) or str(response_model)
