"""Per-operation classification of HTTP status codes."""

from __future__ import annotations

from enum import Enum


class OperationCategory(str, Enum):
    GET_INFO = "getInfo"
    QUERY = "query"
    LIST = "list"
    GET = "get"
    CREATE = "create"
    REPLACE = "replace"
    DELETE = "delete"
    EXECUTE = "execute"
    OTHER = "other"


# 404, 409 and 412 are ordinary outcomes for conditional or idempotent calls
SUCCESS_CODES: dict[OperationCategory, frozenset[int]] = {
    OperationCategory.GET_INFO: frozenset({200}),
    OperationCategory.QUERY: frozenset({200}),
    OperationCategory.LIST: frozenset({200, 304}),
    OperationCategory.GET: frozenset({200, 304, 404}),
    OperationCategory.CREATE: frozenset({201, 409}),
    OperationCategory.REPLACE: frozenset({200, 404, 409, 412}),
    OperationCategory.DELETE: frozenset({204, 404, 412}),
    OperationCategory.EXECUTE: frozenset({200}),
}

# Inclusive bounds for anything without its own set
OTHER_RANGE = (200, 409)


def is_error(category: OperationCategory | str, status_code: int) -> bool:
    """Return True when ``status_code`` is not an accepted outcome for ``category``."""
    category = OperationCategory(category)
    accepted = SUCCESS_CODES.get(category)
    if accepted is None:
        low, high = OTHER_RANGE
        return not (low <= status_code <= high)
    return status_code not in accepted
