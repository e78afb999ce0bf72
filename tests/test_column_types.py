"""Tests for the codec-backed column types."""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import asyncpg

from shipman.database.types import GUID, Blob, DefaultedText, JSONDocument
from shipman.exceptions import DecodingFaultException
from shipman.models import CharterDetail, Payment

dialect = postgresql.dialect()


def test_guid_binds_text_and_returns_uuid():
    value = uuid.uuid4()
    column_type = GUID()
    assert column_type.process_bind_param(value, dialect) == str(value)
    assert column_type.process_result_value(str(value), dialect) == value


def test_guid_surfaces_corrupt_identifier():
    with pytest.raises(DecodingFaultException):
        GUID().process_result_value("zzzz", dialect)


def test_blob_uses_bytea_on_postgres():
    assert Blob().compile(dialect=dialect) == "BYTEA"


def test_blob_empty_payload_is_absent():
    assert Blob().process_bind_param(b"", dialect) is None
    assert Blob().process_result_value(b"", dialect) is None


def test_json_document_treats_empty_as_absent():
    assert JSONDocument().process_bind_param({}, dialect) is None
    assert JSONDocument().process_result_value({"a": 1}, dialect) == {"a": 1}


def test_defaulted_text_fills_null():
    column_type = DefaultedText("pending")
    assert column_type.process_result_value(None, dialect) == "pending"
    assert column_type.process_result_value("paid", dialect) == "paid"


@pytest.mark.parametrize(
    "column, expected",
    [
        (Payment.__table__.c.category, "general"),
        (Payment.__table__.c.currency, "USD"),
        (Payment.__table__.c.status, "pending"),
        (CharterDetail.__table__.c.status, "draft"),
        (CharterDetail.__table__.c.ai_status, "pending"),
    ],
)
def test_store_defaults_declared_on_columns(column, expected):
    assert column.server_default.arg == expected


@pytest.mark.parametrize("value", [None, {}])
def test_json_document_absent_binds_sql_null_through_driver(value):
    processor = JSONDocument().bind_processor(asyncpg.dialect())
    assert processor(value) is None
