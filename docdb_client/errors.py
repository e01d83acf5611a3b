"""Exceptions and the pluggable error handlers."""

from __future__ import annotations

import logging
import pprint
import sys
from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .response import DocumentDBResponse

logger = logging.getLogger(__name__)

ErrorHandler = Callable[..., Any]


class DocumentDBError(Exception):
    """Base exception for document database client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: int | None = None,
        response: DocumentDBResponse | None = None,
        result: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.response = response
        self.result = result


class TransportError(DocumentDBError):
    """The HTTP exchange did not complete."""
    pass


class ProtocolError(DocumentDBError):
    """Status code outside the accepted set for the operation."""
    pass


class PayloadError(DocumentDBError):
    """Non-empty response body that is not valid JSON."""
    pass


class ResolutionError(DocumentDBError):
    """A database or collection name could not be turned into a resource id."""
    pass


def _describe(response: DocumentDBResponse | None) -> dict[str, Any]:
    if response is None:
        return {"status": None}
    info: dict[str, Any] = {
        "status": response.status.value,
        "message": response.message,
        "code": response.code,
    }
    result = response.data if response.is_success else None
    if result is not None:
        info.update(
            status_code=result.status_code,
            headers=result.headers,
            body=result.body,
            is_db_error=result.is_db_error,
            is_parse_error=result.is_parse_error,
        )
    return info


def default_error_handler(response: DocumentDBResponse | None, *args: Any) -> Any:
    """Dump the failed response and terminate the process."""
    info = _describe(response)
    logger.error(f"Unrecoverable document database response: {info}")
    pprint.pprint(info, stream=sys.stderr)
    sys.exit(1)


def raise_error_handler(response: DocumentDBResponse | None, *args: Any) -> Any:
    """
    Raise the typed exception matching the failure.

    A successful response routed here means the payload lacked the key
    the caller needed (a listing without its array, a create without
    "_rid"), which is reported as a ResolutionError.
    """
    result = args[0] if args else None

    if response is None:
        raise ResolutionError("Resource could not be resolved", result=result)

    if not response.is_success:
        raise TransportError(
            response.message or "Request failed",
            code=response.code,
            response=response,
        )

    outcome = response.data
    if outcome.is_db_error:
        raise ProtocolError(
            f"Unexpected status {outcome.status_code}: {outcome.text}",
            status_code=outcome.status_code,
            response=response,
            result=outcome,
        )
    if outcome.is_parse_error:
        raise PayloadError(
            f"Response body is not valid JSON (status {outcome.status_code})",
            status_code=outcome.status_code,
            response=response,
            result=outcome,
        )
    raise ResolutionError(
        f"Response is missing the expected payload (status {outcome.status_code})",
        status_code=outcome.status_code,
        response=response,
        result=result,
    )


def return_default_handler(response: DocumentDBResponse | None, *args: Any) -> Any:
    """Log and hand back the partial result or caller-supplied default."""
    logger.warning(f"Ignoring document database error: {_describe(response)}")
    return args[0] if args else None


ERROR_HANDLERS: dict[str, ErrorHandler] = {
    "default": default_error_handler,
    "raise": raise_error_handler,
    "ignore": return_default_handler,
}


def resolve_error_handler(handler: ErrorHandler | str | None) -> ErrorHandler:
    """Accept a callable or one of the names in ERROR_HANDLERS."""
    if handler is None:
        return default_error_handler
    if callable(handler):
        return handler
    try:
        return ERROR_HANDLERS[handler]
    except KeyError:
        raise ValueError(
            f"Unknown error handler {handler!r}; expected one of {sorted(ERROR_HANDLERS)}"
        ) from None
