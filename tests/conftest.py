"""Shared pytest fixtures for docdb_client tests."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any

import pytest

from docdb_client.config import ClientConfig
from docdb_client.transport import TransportFailure, Transported

from tests.fixtures.mock_service import MockDocumentDBService, create_mock_service_for_shop

MASTER_KEY = base64.b64encode(b"unit-test-master-key-0123456789").decode("ascii")


@dataclass
class FakeTransport:
    """Transport double returning queued outcomes and recording each send."""

    outcomes: list[Any] = field(default_factory=list)
    sent: list[dict[str, Any]] = field(default_factory=list)

    def queue(self, status_code: int = 200, body: bytes | str = b"", headers: dict | None = None) -> None:
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.outcomes.append(Transported(status_code=status_code, headers=headers or {}, body=body))

    def queue_failure(self, message: str = "connection refused", code: int = 0) -> None:
        self.outcomes.append(TransportFailure(message=message, code=code))

    def send(self, url, method, headers, body=None):
        self.sent.append({"url": url, "method": method, "headers": headers, "body": body})
        if not self.outcomes:
            return Transported(status_code=200, headers={}, body=b"{}")
        return self.outcomes.pop(0)


@pytest.fixture
def master_key() -> str:
    return MASTER_KEY


@pytest.fixture
def make_config():
    """Factory fixture for ClientConfig pointing at the mock host."""
    def _factory(**kwargs) -> ClientConfig:
        kwargs.setdefault("host", "http://mock")
        kwargs.setdefault("master_key", MASTER_KEY)
        kwargs.setdefault("error_handler", "raise")
        return ClientConfig(**kwargs)
    return _factory


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def mock_service() -> MockDocumentDBService:
    return MockDocumentDBService()


@pytest.fixture
def shop_service() -> MockDocumentDBService:
    return create_mock_service_for_shop()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep DOCDB_* variables from the developer's shell out of tests."""
    for name in ("DOCDB_HOST", "DOCDB_MASTER_KEY", "DOCDB_ENABLE_CACHE", "DOCDB_ERROR_HANDLER", "DOCDB_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
