"""Result model and response normalization."""

from __future__ import annotations

import json
import logging
import math
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ErrorHandler, default_error_handler
from .status import OperationCategory, is_error
from .transport import RequestOutcome, TransportFailure

logger = logging.getLogger(__name__)

REQUEST_CHARGE_HEADER = "x-ms-request-charge"


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    # Reserved for application-level signalling; nothing produces it yet
    FAIL = "fail"
    ERROR = "error"


@dataclass
class DocumentDBResult:
    """A completed HTTP exchange, classified for its operation."""
    status_code: int
    headers: dict[str, str]
    body: bytes
    data: Any = None
    is_db_error: bool = False
    is_parse_error: bool = False

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        return not (self.is_db_error or self.is_parse_error)

    @property
    def etag(self) -> str | None:
        if isinstance(self.data, dict) and "_etag" in self.data:
            return self.data["_etag"]
        return _header(self.headers, "etag")

    @property
    def request_charge(self) -> float:
        return _parse_charge(_header(self.headers, REQUEST_CHARGE_HEADER))


@dataclass
class DocumentDBResponse:
    """Outcome of a request as seen by the error handler."""
    status: ResponseStatus
    data: Any = None
    message: str = ""
    code: int = 0

    @property
    def is_success(self) -> bool:
        return self.status is ResponseStatus.SUCCESS


def _header(headers: dict[str, str], name: str) -> str | None:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def _parse_charge(raw: str | None) -> float:
    if not raw:
        return 0.0
    try:
        charge = float(raw)
    except ValueError:
        charge = None
    # The running total only ever grows
    if charge is None or not (math.isfinite(charge) and charge >= 0):
        logger.warning(f"Ignoring unusable {REQUEST_CHARGE_HEADER} header: {raw!r}")
        return 0.0
    return charge


@dataclass
class ChargeMeter:
    """Running total of request charges; safe to share between threads."""
    _total: float = field(default=0.0, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def add(self, charge: float) -> float:
        with self._lock:
            self._total += charge
            return self._total

    @property
    def total(self) -> float:
        with self._lock:
            return self._total


class ResponseNormalizer:
    """
    Turns a transport outcome into a result, charging the meter and
    routing every failure through the configured error handler.
    """

    def __init__(
        self,
        error_handler: ErrorHandler = default_error_handler,
        meter: ChargeMeter | None = None,
    ):
        self.error_handler = error_handler
        self.meter = meter if meter is not None else ChargeMeter()

    def normalize(
        self,
        category: OperationCategory,
        outcome: RequestOutcome,
    ) -> tuple[DocumentDBResult | None, DocumentDBResponse]:
        if isinstance(outcome, TransportFailure):
            return None, DocumentDBResponse(
                status=ResponseStatus.ERROR,
                data=None,
                message=outcome.message,
                code=outcome.code,
            )

        data = None
        is_parse_error = False
        if outcome.body:
            try:
                data = json.loads(outcome.body)
            except ValueError:
                is_parse_error = True
                logger.warning(f"Unparseable response body (status {outcome.status_code})")

        is_db_error = is_error(category, outcome.status_code)
        if is_db_error:
            logger.warning(
                f"Status {outcome.status_code} is an error for {OperationCategory(category).value} operations"
            )

        self.meter.add(_parse_charge(outcome.header(REQUEST_CHARGE_HEADER)))

        result = DocumentDBResult(
            status_code=outcome.status_code,
            headers=dict(outcome.headers),
            body=outcome.body,
            data=data,
            is_db_error=is_db_error,
            is_parse_error=is_parse_error,
        )
        return result, DocumentDBResponse(status=ResponseStatus.SUCCESS, data=result)

    def process(self, category: OperationCategory, outcome: RequestOutcome) -> Any:
        """
        Normalize and return the result, or whatever the error handler
        returns when the request failed in any way.
        """
        result, response = self.normalize(category, outcome)
        if not response.is_success or result is None or not result.ok:
            return self.error_handler(response, result)
        return result

    def call_error_handler(self, *params: Any) -> Any:
        return self.error_handler(*params)
