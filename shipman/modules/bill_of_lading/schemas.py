"""Pydantic schemas for bills of lading.

``encrypted_key`` is raw bytes in Python and base64 text on the wire.
"""

from __future__ import annotations

import base64
import binascii
import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class BillOfLadingDetails(BaseModel):
    voyage_id: uuid.UUID | None = None
    document_number: str = Field(..., min_length=1)
    issue_date: date | None = None
    issuer: str | None = None
    consignee: str | None = None
    notify_party: str | None = None
    cargo_description: str | None = None
    quantity: Decimal | None = None
    quantity_unit: str | None = None
    storage_uri: str | None = None
    checksum: str | None = None
    encrypted_key: bytes | None = None
    notes: str | None = None

    @field_validator("encrypted_key", mode="before")
    @classmethod
    def _decode_key(cls, value):
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except binascii.Error as exc:
                raise ValueError("encrypted_key must be base64") from exc
        return value

    @field_serializer("encrypted_key", when_used="json-unless-none")
    def _encode_key(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")


class BillOfLadingCreate(BillOfLadingDetails):
    charter_detail_id: uuid.UUID


class BillOfLadingUpdate(BillOfLadingDetails):
    """Full replacement of the editable columns."""


class BillOfLadingResponse(BillOfLadingDetails):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    charter_detail_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
