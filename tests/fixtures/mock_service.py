"""
Mock document database service for testing without a real account.

Provides an httpx MockTransport that simulates the REST API in pytest.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable
from unittest.mock import patch

import httpx


@dataclass
class MockDocumentDBService:
    """
    Mock the document database HTTP layer.

    Usage in tests:
        svc = MockDocumentDBService()
        svc.add_database("shop", "rid-shop")
        svc.add_collection("rid-shop", "orders", "rid-orders")

        with svc.patch_httpx():
            client = DocumentDB(config=ClientConfig(host="http://mock", master_key=KEY))
            orders = client.select_collection("shop", "orders")
    """

    databases: dict[str, str] = field(default_factory=dict)
    collections: dict[str, dict[str, str]] = field(default_factory=dict)
    documents: dict[str, dict[str, dict]] = field(default_factory=dict)

    # Charge reported on every response (None to omit the header)
    request_charge: str | None = "1.0"

    # For tracking calls
    call_log: list[tuple[str, str, dict[str, str], bytes]] = field(default_factory=list)

    # Custom handlers for advanced testing
    custom_handlers: dict[str, Callable[[httpx.Request], httpx.Response]] = field(
        default_factory=dict
    )

    _next_rid: int = 0

    def add_database(self, name: str, rid: str) -> None:
        self.databases[name] = rid
        self.collections.setdefault(rid, {})

    def add_collection(self, rid_db: str, name: str, rid: str) -> None:
        self.collections.setdefault(rid_db, {})[name] = rid
        self.documents.setdefault(rid, {})

    def add_document(self, rid_col: str, document: dict) -> None:
        self.documents.setdefault(rid_col, {})[document["_rid"]] = document

    def add_custom_handler(
        self, pattern: str, handler: Callable[[httpx.Request], httpx.Response]
    ) -> None:
        """Add a custom handler for a (method, path) pattern like "POST /dbs"."""
        self.custom_handlers[pattern] = handler

    def _new_rid(self, prefix: str) -> str:
        self._next_rid += 1
        return f"{prefix}-{self._next_rid}"

    def _respond(self, status: int, payload: Any = None) -> httpx.Response:
        headers = {}
        if self.request_charge is not None:
            headers["x-ms-request-charge"] = self.request_charge
        if payload is None:
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, json=payload, headers=headers)

    def _handle_request(self, request: httpx.Request) -> httpx.Response:
        """Route request to appropriate handler."""
        path = request.url.path
        method = request.method
        body = request.read()

        self.call_log.append((method, path, dict(request.headers), body))

        for pattern, handler in self.custom_handlers.items():
            if re.fullmatch(pattern, f"{method} {path}"):
                return handler(request)

        if path in ("", "/") and method == "GET":
            return self._respond(200, {"id": "mock-account", "_rid": ""})

        if path == "/dbs":
            if method == "GET":
                rows = [{"id": name, "_rid": rid} for name, rid in self.databases.items()]
                return self._respond(200, {"_rid": "", "Databases": rows, "_count": len(rows)})
            if method == "POST":
                name = json.loads(body)["id"]
                if name in self.databases:
                    return self._respond(409, {"code": "Conflict", "message": "Resource already exists"})
                rid = self._new_rid("db")
                self.add_database(name, rid)
                return self._respond(201, {"id": name, "_rid": rid})

        if match := re.fullmatch(r"/dbs/([^/]+)/colls", path):
            rid_db = match.group(1)
            if rid_db not in self.collections:
                return self._respond(404, {"code": "NotFound"})
            if method == "GET":
                rows = [{"id": n, "_rid": r} for n, r in self.collections[rid_db].items()]
                return self._respond(200, {"_rid": rid_db, "DocumentCollections": rows, "_count": len(rows)})
            if method == "POST":
                name = json.loads(body)["id"]
                if name in self.collections[rid_db]:
                    return self._respond(409, {"code": "Conflict"})
                rid = self._new_rid("coll")
                self.add_collection(rid_db, name, rid)
                return self._respond(201, {"id": name, "_rid": rid})

        if match := re.fullmatch(r"/dbs/([^/]+)/colls/([^/]+)/docs", path):
            rid_col = match.group(2)
            docs = self.documents.setdefault(rid_col, {})
            if method == "GET":
                return self._respond(200, {"_rid": rid_col, "Documents": list(docs.values()), "_count": len(docs)})
            if method == "POST" and request.headers.get("x-ms-documentdb-isquery") == "True":
                return self._respond(200, {"_rid": rid_col, "Documents": list(docs.values()), "_count": len(docs)})
            if method == "POST":
                document = json.loads(body)
                upsert = request.headers.get("x-ms-documentdb-is-upsert") == "True"
                existing = next((d for d in docs.values() if d.get("id") == document.get("id")), None)
                if existing is not None and not upsert:
                    return self._respond(409, {"code": "Conflict"})
                document["_rid"] = existing["_rid"] if existing else self._new_rid("doc")
                document["_etag"] = f"\"etag-{document['_rid']}\""
                docs[document["_rid"]] = document
                return self._respond(201, document)

        if match := re.fullmatch(r"/dbs/([^/]+)/colls/([^/]+)/docs/([^/]+)", path):
            rid_col, rid_doc = match.group(2), match.group(3)
            docs = self.documents.setdefault(rid_col, {})
            if rid_doc not in docs:
                return self._respond(404, {"code": "NotFound"})
            current = docs[rid_doc]
            if_match = request.headers.get("if-match")
            if method in ("PUT", "DELETE") and if_match is not None and if_match != current["_etag"]:
                return self._respond(412, {"code": "PreconditionFailed"})
            if method == "GET":
                if request.headers.get("if-none-match") == current["_etag"]:
                    return self._respond(304)
                return self._respond(200, current)
            if method == "PUT":
                document = json.loads(body)
                document["_rid"] = rid_doc
                document["_etag"] = f"\"etag-{rid_doc}-{self._new_rid('v')}\""
                docs[rid_doc] = document
                return self._respond(200, document)
            if method == "DELETE":
                del docs[rid_doc]
                return self._respond(204)

        return self._respond(404, {"code": "NotFound", "message": f"Unknown endpoint: {method} {path}"})

    def get_transport(self) -> httpx.MockTransport:
        """Get httpx MockTransport for use with httpx.Client."""
        return httpx.MockTransport(self._handle_request)

    def patch_httpx(self):
        """
        Context manager to patch httpx.Client to use mock transport.

        Usage:
            with mock_service.patch_httpx():
                client = DocumentDB(...)
                client.list_databases()
        """
        transport = self.get_transport()

        original_init = httpx.Client.__init__

        def patched_init(self_client, *args, **kwargs):
            kwargs["transport"] = transport
            original_init(self_client, *args, **kwargs)

        return patch.object(httpx.Client, "__init__", patched_init)

    def get_calls(self, method: str | None = None, path: str | None = None) -> list[tuple[str, str, dict[str, str], bytes]]:
        """Get logged calls, optionally filtered by method and exact path."""
        return [
            call for call in self.call_log
            if (method is None or call[0] == method) and (path is None or call[1] == path)
        ]

    def clear_calls(self) -> None:
        """Clear the call log."""
        self.call_log.clear()


def create_mock_service_for_shop() -> MockDocumentDBService:
    """A service with one database holding one collection and two documents."""
    svc = MockDocumentDBService()
    svc.add_database("shop", "rid-shop")
    svc.add_database("archive", "rid-archive")
    svc.add_collection("rid-shop", "orders", "rid-orders")
    svc.add_collection("rid-shop", "customers", "rid-customers")
    svc.add_document("rid-orders", {"id": "1001", "_rid": "rid-doc-1", "_etag": "\"etag-1\"", "total": 42})
    svc.add_document("rid-orders", {"id": "1002", "_rid": "rid-doc-2", "_etag": "\"etag-2\"", "total": 7})
    return svc
