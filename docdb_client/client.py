"""Main client class and the database/collection handles."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Union
from urllib.parse import quote_plus

from .auth import MasterKeySigner
from .cache import ResourceIdCache
from .config import ClientConfig
from .errors import resolve_error_handler
from .response import (
    ChargeMeter,
    DocumentDBResponse,
    DocumentDBResult,
    ResponseNormalizer,
    ResponseStatus,
)
from .status import OperationCategory
from .transport import HttpxTransport, Transport, TransportFailure

logger = logging.getLogger(__name__)

Body = Union[str, bytes, dict, list, None]

# Extra headers
QUERY_HEADERS = {
    "x-ms-max-item-count": "-1",
    "x-ms-documentdb-isquery": "True",
}
UPSERT_HEADER = "x-ms-documentdb-is-upsert"


def _encode_body(body: Body) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


def _conditional(
    if_match: str | None = None,
    if_none_match: str | None = None,
) -> dict[str, str]:
    headers = {}
    if if_match is not None:
        headers["If-Match"] = if_match
    if if_none_match is not None:
        headers["If-None-Match"] = if_none_match
    return headers


@dataclass
class DocumentDB:
    """
    Client for the document database REST API.

    Every operation signs its request, sends it through the transport and
    returns a DocumentDBResult. Any failure (transport error, status code
    outside the accepted set for the operation, unparseable body) goes to
    the configured error handler instead, and the handler's return value
    is returned in place of the result.

    Usage:
        client = DocumentDB(config=ClientConfig(
            host="https://myaccount.documents.azure.com",
            master_key="...",
            enable_cache=True,
            error_handler="raise",
        ))

        orders = client.select_collection("shop", "orders")
        orders.create_document({"id": "1001", "total": 42})
        rows = orders.query("SELECT * FROM c WHERE c.total > 10").data

        print(client.get_charge())
    """
    config: ClientConfig = field(default_factory=ClientConfig)
    transport: Transport | None = None

    _signer: MasterKeySigner = field(init=False, repr=False)
    _meter: ChargeMeter = field(default_factory=ChargeMeter, init=False, repr=False)
    _normalizer: ResponseNormalizer = field(init=False, repr=False)
    _cache: ResourceIdCache = field(init=False, repr=False)
    _databases: dict[str, Database] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.config.validate()
        self._signer = MasterKeySigner(self.config.master_key)
        if self.transport is None:
            self.transport = HttpxTransport(timeout=self.config.timeout)
        self._normalizer = ResponseNormalizer(
            error_handler=resolve_error_handler(self.config.error_handler),
            meter=self._meter,
        )
        self._cache = ResourceIdCache(
            self._list_database_rows,
            self._create_database_rid,
            enabled=self.config.enable_cache,
        )

    @classmethod
    def connect(cls, host: str, master_key: str, **options: Any) -> DocumentDB:
        """Build a client from explicit credentials plus ClientConfig options."""
        return cls(config=ClientConfig(host=host, master_key=master_key, **options))

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------

    def _request(
        self,
        category: OperationCategory,
        verb: str,
        resource_type: str,
        resource_id: str,
        path: str,
        body: Body = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        request_headers = self._signer.sign(verb, resource_type, resource_id).as_dict()
        content = _encode_body(body)
        request_headers["Content-Length"] = str(len(content) if content else 0)
        if headers:
            request_headers.update(headers)

        logger.debug(f"{verb} {path}")
        try:
            outcome = self.transport.send(self.config.host + path, verb, request_headers, content)
        except Exception as e:
            logger.warning(f"Transport raised on {verb} {path}: {e!r}")
            outcome = TransportFailure(message=str(e) or type(e).__name__, code=0)
        return self._normalizer.process(category, outcome)

    def call_error_handler(self, *params: Any) -> Any:
        """Invoke the configured error handler and return its value."""
        return self._normalizer.call_error_handler(*params)

    def _payload(self, result: Any, key: str, default: Any) -> Any:
        """Pull ``key`` out of a result body, or defer to the error handler."""
        if isinstance(result, DocumentDBResult) and isinstance(result.data, dict) and key in result.data:
            return result.data[key]
        response = None
        if isinstance(result, DocumentDBResult):
            response = DocumentDBResponse(status=ResponseStatus.SUCCESS, data=result)
        return self.call_error_handler(response, default)

    def get_charge(self) -> float:
        """Total request charge consumed by this client."""
        return self._meter.total

    @property
    def error_handler(self):
        return self._normalizer.error_handler

    @error_handler.setter
    def error_handler(self, handler) -> None:
        self._normalizer.error_handler = resolve_error_handler(handler)

    # ------------------------------------------------------------------
    # Name resolution
    # ------------------------------------------------------------------

    def _list_database_rows(self) -> list[dict[str, Any]]:
        return self._payload(self.list_databases(), "Databases", [])

    def _create_database_rid(self, db_name: str) -> str:
        return self._payload(self.create_database({"id": db_name}), "_rid", "")

    def select_db(self, db_name: str) -> Database | Any:
        """
        Resolve a database by name, creating it if it does not exist.

        Returns a Database handle, or the error handler's value when no
        resource id could be obtained.
        """
        rid_db = self._cache.get(db_name)
        if not rid_db:
            return self.call_error_handler(None, None)

        if not self.config.enable_cache:
            return Database(self, rid_db, enable_cache=False)
        if rid_db not in self._databases:
            self._databases[rid_db] = Database(self, rid_db, enable_cache=True)
        return self._databases[rid_db]

    def select_collection(self, db_name: str, col_name: str) -> Collection | Any:
        """Resolve (or create) a database and one of its collections."""
        db = self.select_db(db_name)
        if not isinstance(db, Database):
            return db
        return db.select_collection(col_name)

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    def get_info(self) -> Any:
        return self._request(OperationCategory.GET_INFO, "GET", "", "", "")

    # ------------------------------------------------------------------
    # Databases
    # ------------------------------------------------------------------

    def list_databases(self, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "dbs", "", "/dbs",
            headers=_conditional(if_none_match=if_none_match),
        )

    def get_database(self, rid_db: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.GET, "GET", "dbs", rid_db, f"/dbs/{rid_db}",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_database(self, body: Body) -> Any:
        return self._request(OperationCategory.CREATE, "POST", "dbs", "", "/dbs", body)

    def replace_database(self, rid_db: str, body: Body, if_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "dbs", rid_db, f"/dbs/{rid_db}", body,
            headers=_conditional(if_match=if_match),
        )

    def delete_database(self, rid_db: str, if_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "dbs", rid_db, f"/dbs/{rid_db}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def list_users(self, rid_db: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "users", rid_db, f"/dbs/{rid_db}/users",
            headers=_conditional(if_none_match=if_none_match),
        )

    def get_user(self, rid_db: str, rid_user: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.GET, "GET", "users", rid_user, f"/dbs/{rid_db}/users/{rid_user}",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_user(self, rid_db: str, body: Body) -> Any:
        return self._request(
            OperationCategory.CREATE, "POST", "users", rid_db, f"/dbs/{rid_db}/users", body,
        )

    def replace_user(
        self, rid_db: str, rid_user: str, body: Body, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "users", rid_user, f"/dbs/{rid_db}/users/{rid_user}", body,
            headers=_conditional(if_match=if_match),
        )

    def delete_user(self, rid_db: str, rid_user: str, if_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "users", rid_user, f"/dbs/{rid_db}/users/{rid_user}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------

    def list_permissions(
        self, rid_db: str, rid_user: str, if_none_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "permissions", rid_user,
            f"/dbs/{rid_db}/users/{rid_user}/permissions",
            headers=_conditional(if_none_match=if_none_match),
        )

    def get_permission(
        self, rid_db: str, rid_user: str, rid_permission: str, if_none_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.GET, "GET", "permissions", rid_permission,
            f"/dbs/{rid_db}/users/{rid_user}/permissions/{rid_permission}",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_permission(self, rid_db: str, rid_user: str, body: Body) -> Any:
        return self._request(
            OperationCategory.CREATE, "POST", "permissions", rid_user,
            f"/dbs/{rid_db}/users/{rid_user}/permissions", body,
        )

    def replace_permission(
        self, rid_db: str, rid_user: str, rid_permission: str, body: Body,
        if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "permissions", rid_permission,
            f"/dbs/{rid_db}/users/{rid_user}/permissions/{rid_permission}", body,
            headers=_conditional(if_match=if_match),
        )

    def delete_permission(
        self, rid_db: str, rid_user: str, rid_permission: str, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "permissions", rid_permission,
            f"/dbs/{rid_db}/users/{rid_user}/permissions/{rid_permission}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def list_collections(self, rid_db: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "colls", rid_db, f"/dbs/{rid_db}/colls",
            headers=_conditional(if_none_match=if_none_match),
        )

    def get_collection(self, rid_db: str, rid_col: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.GET, "GET", "colls", rid_col, f"/dbs/{rid_db}/colls/{rid_col}",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_collection(self, rid_db: str, body: Body) -> Any:
        return self._request(
            OperationCategory.CREATE, "POST", "colls", rid_db, f"/dbs/{rid_db}/colls", body,
        )

    def delete_collection(self, rid_db: str, rid_col: str, if_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "colls", rid_col, f"/dbs/{rid_db}/colls/{rid_col}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def query(self, rid_db: str, rid_col: str, query: str | dict) -> Any:
        """
        Run a query against a collection.

        A string is sent verbatim as ``application/sql``; a dict (query
        text plus parameters) as ``application/query+json``.
        """
        content_type = "application/sql" if isinstance(query, (str, bytes)) else "application/query+json"
        return self._request(
            OperationCategory.QUERY, "POST", "docs", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/docs", query,
            headers={"Content-Type": content_type, **QUERY_HEADERS},
        )

    def list_documents(self, rid_db: str, rid_col: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "docs", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/docs",
            headers=_conditional(if_none_match=if_none_match),
        )

    def get_document(
        self, rid_db: str, rid_col: str, rid_doc: str, if_none_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.GET, "GET", "docs", rid_doc, f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_document(self, rid_db: str, rid_col: str, body: Body, upsert: bool = False) -> Any:
        """Create a document; with ``upsert`` an existing one with the same id is replaced."""
        headers = {UPSERT_HEADER: "True"} if upsert else None
        return self._request(
            OperationCategory.CREATE, "POST", "docs", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/docs", body,
            headers=headers,
        )

    def replace_document(
        self, rid_db: str, rid_col: str, rid_doc: str, body: Body, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "docs", rid_doc,
            f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}", body,
            headers=_conditional(if_match=if_match),
        )

    def delete_document(
        self, rid_db: str, rid_col: str, rid_doc: str, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "docs", rid_doc,
            f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    def list_attachments(
        self, rid_db: str, rid_col: str, rid_doc: str, if_none_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "attachments", rid_doc,
            f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}/attachments",
            headers=_conditional(if_none_match=if_none_match),
        )

    def get_attachment(
        self, rid_db: str, rid_col: str, rid_doc: str, rid_attachment: str,
        if_none_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.GET, "GET", "attachments", rid_attachment,
            f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}/attachments/{rid_attachment}",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_attachment(
        self, rid_db: str, rid_col: str, rid_doc: str,
        content_type: str, filename: str, content: bytes,
    ) -> Any:
        """Upload raw media; ``filename`` travels URL-encoded in the Slug header."""
        return self._request(
            OperationCategory.CREATE, "POST", "attachments", rid_doc,
            f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}/attachments", content,
            headers={"Content-Type": content_type, "Slug": quote_plus(filename)},
        )

    def replace_attachment(
        self, rid_db: str, rid_col: str, rid_doc: str, rid_attachment: str,
        content_type: str, filename: str, content: bytes, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "attachments", rid_attachment,
            f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}/attachments/{rid_attachment}", content,
            headers={
                "Content-Type": content_type,
                "Slug": quote_plus(filename),
                **_conditional(if_match=if_match),
            },
        )

    def delete_attachment(
        self, rid_db: str, rid_col: str, rid_doc: str, rid_attachment: str,
        if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "attachments", rid_attachment,
            f"/dbs/{rid_db}/colls/{rid_col}/docs/{rid_doc}/attachments/{rid_attachment}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # Offers (no create/delete: offers follow their collections)
    # ------------------------------------------------------------------

    def list_offers(self, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "offers", "", "/offers",
            headers=_conditional(if_none_match=if_none_match),
        )

    def get_offer(self, rid_offer: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.GET, "GET", "offers", rid_offer, f"/offers/{rid_offer}",
            headers=_conditional(if_none_match=if_none_match),
        )

    def replace_offer(self, rid_offer: str, body: Body, if_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "offers", rid_offer, f"/offers/{rid_offer}", body,
            headers=_conditional(if_match=if_match),
        )

    def query_offers(self, body: Body) -> Any:
        return self._request(
            OperationCategory.QUERY, "POST", "offers", "", "/offers", body,
            headers={
                "Content-Type": "application/query+json",
                "x-ms-documentdb-isquery": "True",
            },
        )

    # ------------------------------------------------------------------
    # Stored procedures
    # ------------------------------------------------------------------

    def list_stored_procedures(
        self, rid_db: str, rid_col: str, if_none_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "sprocs", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/sprocs",
            headers=_conditional(if_none_match=if_none_match),
        )

    def execute_stored_procedure(self, rid_db: str, rid_col: str, rid_sproc: str, params: Body) -> Any:
        return self._request(
            OperationCategory.EXECUTE, "POST", "sprocs", rid_sproc,
            f"/dbs/{rid_db}/colls/{rid_col}/sprocs/{rid_sproc}", params,
        )

    def create_stored_procedure(self, rid_db: str, rid_col: str, body: Body) -> Any:
        return self._request(
            OperationCategory.CREATE, "POST", "sprocs", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/sprocs", body,
        )

    def replace_stored_procedure(
        self, rid_db: str, rid_col: str, rid_sproc: str, body: Body, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "sprocs", rid_sproc,
            f"/dbs/{rid_db}/colls/{rid_col}/sprocs/{rid_sproc}", body,
            headers=_conditional(if_match=if_match),
        )

    def delete_stored_procedure(
        self, rid_db: str, rid_col: str, rid_sproc: str, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "sprocs", rid_sproc,
            f"/dbs/{rid_db}/colls/{rid_col}/sprocs/{rid_sproc}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # User-defined functions
    # ------------------------------------------------------------------

    def list_user_defined_functions(
        self, rid_db: str, rid_col: str, if_none_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "udfs", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/udfs",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_user_defined_function(self, rid_db: str, rid_col: str, body: Body) -> Any:
        return self._request(
            OperationCategory.CREATE, "POST", "udfs", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/udfs", body,
        )

    def replace_user_defined_function(
        self, rid_db: str, rid_col: str, rid_udf: str, body: Body, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "udfs", rid_udf,
            f"/dbs/{rid_db}/colls/{rid_col}/udfs/{rid_udf}", body,
            headers=_conditional(if_match=if_match),
        )

    def delete_user_defined_function(
        self, rid_db: str, rid_col: str, rid_udf: str, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "udfs", rid_udf,
            f"/dbs/{rid_db}/colls/{rid_col}/udfs/{rid_udf}",
            headers=_conditional(if_match=if_match),
        )

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def list_triggers(self, rid_db: str, rid_col: str, if_none_match: str | None = None) -> Any:
        return self._request(
            OperationCategory.LIST, "GET", "triggers", rid_col, f"/dbs/{rid_db}/colls/{rid_col}/triggers",
            headers=_conditional(if_none_match=if_none_match),
        )

    def create_trigger(self, rid_db: str, rid_col: str, body: Body) -> Any:
        return self._request(
            OperationCategory.CREATE, "POST", "triggers", rid_col,
            f"/dbs/{rid_db}/colls/{rid_col}/triggers", body,
        )

    def replace_trigger(
        self, rid_db: str, rid_col: str, rid_trigger: str, body: Body, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.REPLACE, "PUT", "triggers", rid_trigger,
            f"/dbs/{rid_db}/colls/{rid_col}/triggers/{rid_trigger}", body,
            headers=_conditional(if_match=if_match),
        )

    def delete_trigger(
        self, rid_db: str, rid_col: str, rid_trigger: str, if_match: str | None = None,
    ) -> Any:
        return self._request(
            OperationCategory.DELETE, "DELETE", "triggers", rid_trigger,
            f"/dbs/{rid_db}/colls/{rid_col}/triggers/{rid_trigger}",
            headers=_conditional(if_match=if_match),
        )


class Database:
    """
    Handle on one database, resolving its collections by name.

    Usage:
        db = client.select_db("shop")
        orders = db.select_collection("orders")
    """

    def __init__(self, client: DocumentDB, rid: str, enable_cache: bool = False):
        self._client = client
        self.rid = rid
        self._cache = ResourceIdCache(
            self._list_collection_rows,
            self._create_collection_rid,
            enabled=enable_cache,
        )

    def __repr__(self) -> str:
        return f"Database({self.rid!r})"

    def _list_collection_rows(self) -> list[dict[str, Any]]:
        return self._client._payload(
            self._client.list_collections(self.rid), "DocumentCollections", [],
        )

    def _create_collection_rid(self, col_name: str) -> str:
        return self._client._payload(
            self._client.create_collection(self.rid, {"id": col_name}), "_rid", "",
        )

    def select_collection(self, col_name: str) -> Collection | Any:
        """Resolve a collection by name, creating it if it does not exist."""
        rid_col = self._cache.get(col_name)
        if not rid_col:
            return self._client.call_error_handler(None, None)
        return Collection(self._client, self.rid, rid_col)

    def get(self, if_none_match: str | None = None) -> Any:
        return self._client.get_database(self.rid, if_none_match)

    def replace(self, body: Body, if_match: str | None = None) -> Any:
        return self._client.replace_database(self.rid, body, if_match)

    def delete(self, if_match: str | None = None) -> Any:
        return self._client.delete_database(self.rid, if_match)

    def list_collections(self, if_none_match: str | None = None) -> Any:
        return self._client.list_collections(self.rid, if_none_match)

    def create_collection(self, body: Body) -> Any:
        return self._client.create_collection(self.rid, body)

    def delete_collection(self, rid_col: str, if_match: str | None = None) -> Any:
        return self._client.delete_collection(self.rid, rid_col, if_match)

    def list_users(self, if_none_match: str | None = None) -> Any:
        return self._client.list_users(self.rid, if_none_match)

    def get_user(self, rid_user: str, if_none_match: str | None = None) -> Any:
        return self._client.get_user(self.rid, rid_user, if_none_match)

    def create_user(self, body: Body) -> Any:
        return self._client.create_user(self.rid, body)

    def replace_user(self, rid_user: str, body: Body, if_match: str | None = None) -> Any:
        return self._client.replace_user(self.rid, rid_user, body, if_match)

    def delete_user(self, rid_user: str, if_match: str | None = None) -> Any:
        return self._client.delete_user(self.rid, rid_user, if_match)

    def list_permissions(self, rid_user: str, if_none_match: str | None = None) -> Any:
        return self._client.list_permissions(self.rid, rid_user, if_none_match)

    def get_permission(self, rid_user: str, rid_permission: str, if_none_match: str | None = None) -> Any:
        return self._client.get_permission(self.rid, rid_user, rid_permission, if_none_match)

    def create_permission(self, rid_user: str, body: Body) -> Any:
        return self._client.create_permission(self.rid, rid_user, body)

    def replace_permission(
        self, rid_user: str, rid_permission: str, body: Body, if_match: str | None = None,
    ) -> Any:
        return self._client.replace_permission(self.rid, rid_user, rid_permission, body, if_match)

    def delete_permission(self, rid_user: str, rid_permission: str, if_match: str | None = None) -> Any:
        return self._client.delete_permission(self.rid, rid_user, rid_permission, if_match)


class Collection:
    """Handle on one collection; holds only the ids needed to address it."""

    def __init__(self, client: DocumentDB, rid_db: str, rid_col: str):
        self._client = client
        self.rid_db = rid_db
        self.rid = rid_col

    def __repr__(self) -> str:
        return f"Collection({self.rid_db!r}, {self.rid!r})"

    def get(self, if_none_match: str | None = None) -> Any:
        return self._client.get_collection(self.rid_db, self.rid, if_none_match)

    def delete(self, if_match: str | None = None) -> Any:
        return self._client.delete_collection(self.rid_db, self.rid, if_match)

    def query(self, query: str | dict) -> Any:
        return self._client.query(self.rid_db, self.rid, query)

    def create_document(self, body: Body, upsert: bool = False) -> Any:
        return self._client.create_document(self.rid_db, self.rid, body, upsert)

    def list_documents(self, if_none_match: str | None = None) -> Any:
        return self._client.list_documents(self.rid_db, self.rid, if_none_match)

    def get_document(self, rid_doc: str, if_none_match: str | None = None) -> Any:
        return self._client.get_document(self.rid_db, self.rid, rid_doc, if_none_match)

    def replace_document(self, rid_doc: str, body: Body, if_match: str | None = None) -> Any:
        return self._client.replace_document(self.rid_db, self.rid, rid_doc, body, if_match)

    def delete_document(self, rid_doc: str, if_match: str | None = None) -> Any:
        return self._client.delete_document(self.rid_db, self.rid, rid_doc, if_match)

    def list_attachments(self, rid_doc: str, if_none_match: str | None = None) -> Any:
        return self._client.list_attachments(self.rid_db, self.rid, rid_doc, if_none_match)

    def get_attachment(self, rid_doc: str, rid_attachment: str, if_none_match: str | None = None) -> Any:
        return self._client.get_attachment(self.rid_db, self.rid, rid_doc, rid_attachment, if_none_match)

    def create_attachment(self, rid_doc: str, content_type: str, filename: str, content: bytes) -> Any:
        return self._client.create_attachment(self.rid_db, self.rid, rid_doc, content_type, filename, content)

    def replace_attachment(
        self, rid_doc: str, rid_attachment: str, content_type: str, filename: str, content: bytes,
        if_match: str | None = None,
    ) -> Any:
        return self._client.replace_attachment(
            self.rid_db, self.rid, rid_doc, rid_attachment, content_type, filename, content, if_match,
        )

    def delete_attachment(self, rid_doc: str, rid_attachment: str, if_match: str | None = None) -> Any:
        return self._client.delete_attachment(self.rid_db, self.rid, rid_doc, rid_attachment, if_match)

    def list_stored_procedures(self, if_none_match: str | None = None) -> Any:
        return self._client.list_stored_procedures(self.rid_db, self.rid, if_none_match)

    def execute_stored_procedure(self, rid_sproc: str, params: Body) -> Any:
        return self._client.execute_stored_procedure(self.rid_db, self.rid, rid_sproc, params)

    def create_stored_procedure(self, body: Body) -> Any:
        return self._client.create_stored_procedure(self.rid_db, self.rid, body)

    def replace_stored_procedure(self, rid_sproc: str, body: Body, if_match: str | None = None) -> Any:
        return self._client.replace_stored_procedure(self.rid_db, self.rid, rid_sproc, body, if_match)

    def delete_stored_procedure(self, rid_sproc: str, if_match: str | None = None) -> Any:
        return self._client.delete_stored_procedure(self.rid_db, self.rid, rid_sproc, if_match)

    def list_user_defined_functions(self, if_none_match: str | None = None) -> Any:
        return self._client.list_user_defined_functions(self.rid_db, self.rid, if_none_match)

    def create_user_defined_function(self, body: Body) -> Any:
        return self._client.create_user_defined_function(self.rid_db, self.rid, body)

    def replace_user_defined_function(self, rid_udf: str, body: Body, if_match: str | None = None) -> Any:
        return self._client.replace_user_defined_function(self.rid_db, self.rid, rid_udf, body, if_match)

    def delete_user_defined_function(self, rid_udf: str, if_match: str | None = None) -> Any:
        return self._client.delete_user_defined_function(self.rid_db, self.rid, rid_udf, if_match)

    def list_triggers(self, if_none_match: str | None = None) -> Any:
        return self._client.list_triggers(self.rid_db, self.rid, if_none_match)

    def create_trigger(self, body: Body) -> Any:
        return self._client.create_trigger(self.rid_db, self.rid, body)

    def replace_trigger(self, rid_trigger: str, body: Body, if_match: str | None = None) -> Any:
        return self._client.replace_trigger(self.rid_db, self.rid, rid_trigger, body, if_match)

    def delete_trigger(self, rid_trigger: str, if_match: str | None = None) -> Any:
        return self._client.delete_trigger(self.rid_db, self.rid, rid_trigger, if_match)
