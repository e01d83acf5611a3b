"""Name to resource-id resolution with list-then-create fallback."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable, Mapping

logger = logging.getLogger(__name__)

ListProvider = Callable[[], Iterable[Mapping[str, Any]]]
CreateProvider = Callable[[str], str]


class ResourceIdCache:
    """
    Resolves human-readable names ("id") to server resource ids ("_rid").

    A miss lists every sibling resource and remembers all of them, so one
    listing serves later lookups of other names too. Names that are still
    missing after the listing are created on the spot.

    Entries never expire. A resource renamed or dropped elsewhere keeps
    resolving to its old id for the lifetime of the cache.

    The lock covers the mapping only. Two threads resolving the same
    missing name can both call ``create``; the id written last wins.
    """

    def __init__(
        self,
        list_func: ListProvider,
        create_func: CreateProvider,
        enabled: bool = True,
    ):
        self._list = list_func
        self._create = create_func
        self.enabled = enabled
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> str:
        """
        Return the resource id for ``name``.

        An empty string means the resource is unavailable (listing failed
        and creation produced no id); callers must not use it as a handle.
        """
        if self.enabled:
            with self._lock:
                cached = self._entries.get(name)
            if cached:
                logger.debug(f"Resource id cache hit for {name!r}")
                return cached

        logger.debug(f"Resource id cache miss for {name!r}, listing")
        rid = ""
        for row in self._list() or ():
            row_name = row.get("id")
            row_rid = row.get("_rid")
            if row_name == name and row_rid:
                rid = row_rid
            if self.enabled and row_name and row_rid:
                with self._lock:
                    self._entries[row_name] = row_rid

        if not rid:
            logger.info(f"Creating missing resource {name!r}")
            rid = self._create(name) or ""
            if self.enabled and rid:
                with self._lock:
                    self._entries[name] = rid

        return rid

    resolve = get

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
