"""HTTP transport boundary."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, Union

import httpx

logger = logging.getLogger(__name__)

METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass
class Transported:
    """The exchange completed; carries whatever the server sent back."""
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default


@dataclass
class TransportFailure:
    """The exchange never completed (DNS, connect, timeout, protocol)."""
    message: str
    code: int = 0


RequestOutcome = Union[Transported, TransportFailure]


class Transport(Protocol):
    def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> RequestOutcome:
        ...


class HttpxTransport:
    """
    Transport backed by httpx.

    Opens a client per request. Every httpx.HTTPError and httpx.InvalidURL
    is returned as a TransportFailure. Timeouts are the only cancellation
    mechanism and come from the configured timeout.
    """

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> RequestOutcome:
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported method: {method}")

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.request(
                    method,
                    url,
                    headers=headers,
                    content=body if body else None,
                )
                return Transported(
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    body=response.content,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            code = 0
            if isinstance(e, httpx.HTTPStatusError):
                code = e.response.status_code
            logger.warning(f"Transport failure on {method} {url}: {e}")
            return TransportFailure(message=str(e) or type(e).__name__, code=code)
