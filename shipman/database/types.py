"""Column types that route every bind/result through the scalar codec."""

from __future__ import annotations

from sqlalchemy import LargeBinary, Text, TypeDecorator
from sqlalchemy.dialects.postgresql import BYTEA, JSONB
from sqlalchemy.dialects.postgresql import UUID as PG_UUID

from shipman.database.codec import (
    decode_blob,
    decode_document,
    decode_uuid,
    decode_with_default,
    encode_blob,
    encode_document,
    encode_optional,
    encode_uuid,
)


class GUID(TypeDecorator):
    """PostgreSQL UUID column that surfaces malformed values as decoding faults.

    The driver is asked for plain strings so that parsing (and the failure
    mode) stays under our control.
    """

    impl = PG_UUID(as_uuid=False)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encode_uuid(value)

    def process_result_value(self, value, dialect):
        return decode_uuid(value)


class Blob(TypeDecorator):
    """BYTEA column where an empty payload is indistinguishable from absent."""

    impl = LargeBinary
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(BYTEA())
        return dialect.type_descriptor(LargeBinary())

    def process_bind_param(self, value, dialect):
        return encode_blob(value)

    def process_result_value(self, value, dialect):
        return decode_blob(value)


class JSONDocument(TypeDecorator):
    """JSONB column for structured blobs (capacity, stowage plans, AI terms).

    Absent documents bind as SQL NULL, never the JSON literal ``null``, so
    ``COALESCE(:value, column)`` keeps the stored document.
    """

    impl = JSONB(none_as_null=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encode_document(value)

    def process_result_value(self, value, dialect):
        return decode_document(value)


class DefaultedText(TypeDecorator):
    """TEXT column that always decodes to a value, using ``fallback`` for NULL."""

    impl = Text
    cache_ok = True

    def __init__(self, fallback: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.fallback = fallback

    def process_bind_param(self, value, dialect):
        return encode_optional(value)

    def process_result_value(self, value, dialect):
        return decode_with_default(value, self.fallback)
