"""Scalar codec: maps optional domain values to nullable storage columns.

Absence is ``None`` on both sides. The helpers here are the only place that
decides how an absent, empty or malformed stored value is surfaced; the
column types in :mod:`shipman.database.types` call them on every bind and
every result row.
"""

from __future__ import annotations

import copy
import uuid
from typing import Any, TypeVar

from shipman.exceptions import DecodingFaultException

T = TypeVar("T")


def encode_optional(value: T | None) -> T | None:
    """Return the storage value for an optional field (``None`` means NULL)."""
    if value is None:
        return None
    return value


def decode_optional(raw: T | None) -> T | None:
    """Return the domain value for a nullable column (NULL means absent)."""
    if raw is None:
        return None
    return raw


def decode_with_default(raw: T | None, fallback: T) -> T:
    """Return ``fallback`` when the stored value is NULL.

    Used for status-like columns that always carry a value in the domain even
    if a row predates the column's store-side default.
    """
    if raw is None:
        return fallback
    return raw


def encode_uuid(value: uuid.UUID | str | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return str(value)
    return str(decode_uuid(value))


def decode_uuid(raw: Any) -> uuid.UUID | None:
    """Parse a stored identifier.

    Raises:
        DecodingFaultException: the stored value is not a valid 128-bit
            identifier.
    """
    if raw is None:
        return None
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        if isinstance(raw, (bytes, bytearray, memoryview)):
            return uuid.UUID(bytes=bytes(raw))
        return uuid.UUID(str(raw))
    except (ValueError, TypeError, AttributeError) as exc:
        raise DecodingFaultException(
            f"Stored identifier {raw!r} is not a valid UUID",
            details=[{"value": repr(raw)}],
        ) from exc


def encode_blob(value: bytes | bytearray | memoryview | None) -> bytes | None:
    """Empty blobs are stored as NULL."""
    if value is None or len(value) == 0:
        return None
    return bytes(value)


def decode_blob(raw: bytes | bytearray | memoryview | None) -> bytes | None:
    """Empty or NULL blobs decode to absent; others are copied off the driver buffer."""
    if raw is None or len(raw) == 0:
        return None
    return bytes(bytearray(raw))


def encode_document(value: dict | list | None) -> dict | list | None:
    """Empty JSON documents are stored as NULL."""
    if not value:
        return None
    return value


def decode_document(raw: dict | list | None) -> dict | list | None:
    if not raw:
        return None
    return copy.deepcopy(raw)
