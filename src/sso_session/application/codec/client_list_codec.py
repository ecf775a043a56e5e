"""Client list codec.

Packs the set of participating client ids into a compact string that can sit
in a ticket property: JSON array -> UTF-8 -> base64url without padding.
"""

import base64
import binascii
import json
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ...core.exceptions import ClientListDecodeError, InvalidArgumentError

_BASE64URL = re.compile(r"^[A-Za-z0-9_-]*$")


@dataclass(frozen=True)
class ClientListDecodeResult:
    """Either a decoded client list or the reason decoding failed."""

    client_ids: Tuple[str, ...] = field(default_factory=tuple)
    error: Optional[ClientListDecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, client_ids: Iterable[str]) -> "ClientListDecodeResult":
        return cls(client_ids=tuple(client_ids))

    @classmethod
    def failure(cls, message: str, reason: str) -> "ClientListDecodeResult":
        return cls(error=ClientListDecodeError(message, reason=reason))


def is_valid_client_id(value: object) -> bool:
    """A client id is a non-blank string that survives UTF-8 encoding."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _unique(client_ids: Iterable[str]) -> List[str]:
    # dict keeps first-seen order
    return list(dict.fromkeys(client_ids))


def encode(client_ids: Optional[Iterable[str]]) -> Optional[str]:
    """Encode a set of client ids for storage.

    Args:
        client_ids: Client ids; duplicates are dropped

    Returns:
        base64url text, or None for an absent or empty set so that an empty
        list is never stored explicitly

    Raises:
        InvalidArgumentError: If an id is not a non-empty string
    """
    if client_ids is None:
        return None

    if isinstance(client_ids, str):
        raise InvalidArgumentError("client_ids", "Expected a collection of client ids, not a single string")

    items = list(client_ids)
    if not items:
        return None

    for client_id in items:
        if not is_valid_client_id(client_id):
            raise InvalidArgumentError("client_ids", "Client ids must be non-empty UTF-8 strings")

    unique = _unique(items)
    payload = json.dumps(unique, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")


def decode(value: Optional[str]) -> ClientListDecodeResult:
    """Decode a stored client list.

    Never returns partial data: any structural or encoding problem yields a
    failure result and the caller decides what to do about it.
    """
    if not value:
        return ClientListDecodeResult.success(())

    if not _BASE64URL.match(value):
        return ClientListDecodeResult.failure(
            "Client list contains characters outside the base64url alphabet", "alphabet"
        )

    try:
        raw = base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError) as e:
        return ClientListDecodeResult.failure(f"Client list is not valid base64url: {e}", "base64")

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        return ClientListDecodeResult.failure(f"Client list is not valid UTF-8: {e}", "utf8")

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        return ClientListDecodeResult.failure(f"Client list is not valid JSON: {e}", "json")

    if not isinstance(data, list):
        return ClientListDecodeResult.failure("Client list is not a JSON array", "structure")

    if not all(is_valid_client_id(item) for item in data):
        return ClientListDecodeResult.failure("Client list holds a non-string, blank or non-UTF-8 entry", "structure")

    return ClientListDecodeResult.success(_unique(data))
