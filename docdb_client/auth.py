"""Master-key request signing for the document database REST API."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from urllib.parse import quote_plus

logger = logging.getLogger(__name__)

API_VERSION = "2017-02-22"
USER_AGENT = "docdb-client.python/1.0.0"
TOKEN_TYPE = "master"
TOKEN_VERSION = "1.0"

# Signed dates run ahead of the local clock to absorb drift
CLOCK_SKEW = timedelta(minutes=2)


def http_date(now: datetime | None = None) -> str:
    """Render the signing date (RFC 1123, GMT) with the forward skew applied."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return format_datetime((now + CLOCK_SKEW).astimezone(timezone.utc), usegmt=True)


@dataclass(frozen=True)
class AuthHeaders:
    """Headers produced for a single signed request."""

    date: str
    version: str
    signature: str
    verb: str
    resource_type: str
    resource_id: str

    @property
    def authorization(self) -> str:
        return quote_plus(f"type={TOKEN_TYPE}&ver={TOKEN_VERSION}&sig={self.signature}")

    def as_dict(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            "Cache-Control": "no-cache",
            "x-ms-date": self.date,
            "x-ms-version": self.version,
            "authorization": self.authorization,
        }


class MasterKeySigner:
    """
    Computes the authorization headers for a request.

    The string to sign is the lowercased concatenation of verb, resource
    type, resource id and date, each followed by a newline, plus one
    trailing empty line. It is signed with HMAC-SHA256 keyed by the
    base64-decoded master key.

    Holds no per-request state, so one instance can be shared across
    threads.
    """

    def __init__(self, master_key: str):
        try:
            self._key = base64.b64decode(master_key, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"master key is not valid base64: {e}") from e

    @staticmethod
    def string_to_sign(verb: str, resource_type: str, resource_id: str, date: str) -> str:
        return f"{verb}\n{resource_type}\n{resource_id}\n{date}\n\n".lower()

    def signature(self, verb: str, resource_type: str, resource_id: str, date: str) -> str:
        message = self.string_to_sign(verb, resource_type, resource_id, date)
        digest = hmac.new(self._key, message.encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def sign(
        self,
        verb: str,
        resource_type: str,
        resource_id: str,
        now: datetime | None = None,
    ) -> AuthHeaders:
        """
        Sign one request.

        Args:
            verb: HTTP method (GET, POST, PUT, DELETE)
            resource_type: Resource type segment ("dbs", "colls", "docs", ...)
            resource_id: Id of the innermost addressed resource; for
                creation and listing this is the parent's id
            now: Override the clock (tests)

        Returns:
            AuthHeaders, never reused across requests
        """
        date = http_date(now)
        logger.debug(f"Signing {verb} type={resource_type!r} id={resource_id!r}")
        return AuthHeaders(
            date=date,
            version=API_VERSION,
            signature=self.signature(verb, resource_type, resource_id, date),
            verb=verb,
            resource_type=resource_type,
            resource_id=resource_id,
        )
