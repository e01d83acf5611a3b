"""
Client library for the document database REST API.

Usage:
    from docdb_client import DocumentDB, ClientConfig

    client = DocumentDB(config=ClientConfig(
        host="https://myaccount.documents.azure.com",
        master_key="<base64 key>",
        enable_cache=True,
        error_handler="raise",
    ))
    orders = client.select_collection("shop", "orders")
    orders.create_document({"id": "1001", "total": 42}, upsert=True)
"""

from .auth import AuthHeaders, MasterKeySigner, http_date
from .cache import ResourceIdCache
from .client import Collection, Database, DocumentDB
from .config import ClientConfig
from .errors import (
    DocumentDBError,
    PayloadError,
    ProtocolError,
    ResolutionError,
    TransportError,
    default_error_handler,
    raise_error_handler,
    return_default_handler,
)
from .response import (
    ChargeMeter,
    DocumentDBResponse,
    DocumentDBResult,
    ResponseNormalizer,
    ResponseStatus,
)
from .status import OperationCategory, is_error
from .transport import HttpxTransport, Transport, TransportFailure, Transported

__version__ = "1.0.0"

__all__ = [
    "AuthHeaders",
    "ChargeMeter",
    "ClientConfig",
    "Collection",
    "Database",
    "DocumentDB",
    "DocumentDBError",
    "DocumentDBResponse",
    "DocumentDBResult",
    "HttpxTransport",
    "MasterKeySigner",
    "OperationCategory",
    "PayloadError",
    "ProtocolError",
    "ResolutionError",
    "ResourceIdCache",
    "ResponseNormalizer",
    "ResponseStatus",
    "Transport",
    "TransportError",
    "TransportFailure",
    "Transported",
    "default_error_handler",
    "http_date",
    "is_error",
    "raise_error_handler",
    "return_default_handler",
]
