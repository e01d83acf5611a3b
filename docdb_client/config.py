"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Config file search paths (in order of precedence, last wins)
CONFIG_SEARCH_PATHS = [
    Path.home() / ".docdb" / "client.yaml",  # User-level defaults
    Path(".docdb.yaml"),  # Project-level overrides
]


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


@dataclass
class ClientConfig:
    """
    Configuration for the document database client.

    Precedence (lowest to highest):
    1. Defaults
    2. Environment variables (DOCDB_*)
    3. ~/.docdb/client.yaml
    4. .docdb.yaml (project root)
    5. Constructor arguments

    host, master_key, enable_cache and error_handler configure the client.
    timeout only configures the default HTTP transport.
    """
    # Account endpoint, e.g. https://myaccount.documents.azure.com
    host: str = field(
        default_factory=lambda: os.environ.get("DOCDB_HOST", "")
    )

    # Base64 master key (primary or secondary)
    master_key: str = field(
        default_factory=lambda: os.environ.get("DOCDB_MASTER_KEY", ""), repr=False
    )

    # Remember database/collection resource ids after the first lookup
    enable_cache: bool = field(
        default_factory=lambda: _env_bool("DOCDB_ENABLE_CACHE")
    )

    # Callable(response, result) or "default" / "raise" / "ignore"
    error_handler: Any = field(
        default_factory=lambda: os.environ.get("DOCDB_ERROR_HANDLER", "default")
    )

    # Seconds; only handed to the default HttpxTransport, never to the core
    timeout: float = field(
        default_factory=lambda: float(os.environ.get("DOCDB_TIMEOUT", "30"))
    )

    def __post_init__(self) -> None:
        self.host = (self.host or "").rstrip("/")

    def validate(self) -> None:
        if not self.host:
            raise ValueError("host is required (set DOCDB_HOST or pass host=)")
        if not self.master_key:
            raise ValueError("master_key is required (set DOCDB_MASTER_KEY or pass master_key=)")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientConfig:
        """Create config from dictionary."""
        enable_cache = data.get("enable_cache", os.environ.get("DOCDB_ENABLE_CACHE", "false"))
        if isinstance(enable_cache, str):
            enable_cache = enable_cache.lower() in ("1", "true", "yes")
        return cls(
            host=data.get("host", os.environ.get("DOCDB_HOST", "")),
            master_key=data.get("master_key", os.environ.get("DOCDB_MASTER_KEY", "")),
            enable_cache=bool(enable_cache),
            error_handler=data.get("error_handler", os.environ.get("DOCDB_ERROR_HANDLER", "default")),
            timeout=float(data.get("timeout", os.environ.get("DOCDB_TIMEOUT", "30"))),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ClientConfig:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def load(cls, config_file: str | Path | None = None) -> ClientConfig:
        """
        Load config with auto-discovery.

        Search order (last wins):
        1. ~/.docdb/client.yaml
        2. .docdb.yaml
        3. Explicit config_file argument
        4. Environment variables fill anything the files leave unset
        """
        merged: dict[str, Any] = {}

        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                with open(path, "r") as f:
                    merged.update(yaml.safe_load(f) or {})

        if config_file:
            with open(config_file, "r") as f:
                merged.update(yaml.safe_load(f) or {})

        return cls.from_dict(merged)
