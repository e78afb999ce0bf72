"""Tests for the scalar codec."""

from __future__ import annotations

import uuid

import pytest

from shipman.database.codec import (
    decode_blob,
    decode_document,
    decode_optional,
    decode_uuid,
    decode_with_default,
    encode_blob,
    encode_document,
    encode_optional,
    encode_uuid,
)
from shipman.exceptions import DecodingFaultException


class TestOptionalScalars:
    @pytest.mark.parametrize("value", ["MV Aurora", 0, 12.5, False])
    def test_present_value_round_trips(self, value):
        assert decode_optional(encode_optional(value)) == value

    def test_absent_round_trips(self):
        assert encode_optional(None) is None
        assert decode_optional(None) is None

    def test_empty_string_is_a_value(self):
        assert decode_optional(encode_optional("")) == ""

    def test_default_applies_only_to_null(self):
        assert decode_with_default(None, "draft") == "draft"
        assert decode_with_default("active", "draft") == "active"
        assert decode_with_default("", "draft") == ""


class TestUuid:
    def test_round_trip(self):
        value = uuid.uuid4()
        assert decode_uuid(encode_uuid(value)) == value

    def test_absent(self):
        assert encode_uuid(None) is None
        assert decode_uuid(None) is None

    def test_decodes_raw_bytes(self):
        value = uuid.uuid4()
        assert decode_uuid(value.bytes) == value

    def test_malformed_text_is_a_decoding_fault(self):
        with pytest.raises(DecodingFaultException, match="not a valid UUID") as info:
            decode_uuid("not-a-uuid")
        assert info.value.code == "DECODING_FAULT"
        assert info.value.status_code == 500

    def test_wrong_length_bytes_is_a_decoding_fault(self):
        with pytest.raises(DecodingFaultException):
            decode_uuid(b"\x00\x01")

    def test_encode_rejects_malformed_text(self):
        with pytest.raises(DecodingFaultException):
            encode_uuid("1234")


class TestBlob:
    def test_empty_is_stored_as_null(self):
        assert encode_blob(b"") is None
        assert encode_blob(None) is None

    def test_empty_decodes_to_absent(self):
        assert decode_blob(b"") is None
        assert decode_blob(None) is None

    def test_decoded_bytes_do_not_alias_driver_buffer(self):
        buffer = bytearray(b"\x01\x02\x03")
        decoded = decode_blob(buffer)
        buffer[0] = 0xFF
        assert decoded == b"\x01\x02\x03"

    def test_memoryview_is_copied(self):
        assert decode_blob(memoryview(b"key")) == b"key"


class TestDocument:
    def test_empty_document_is_null(self):
        assert encode_document({}) is None
        assert decode_document({}) is None
        assert decode_document(None) is None

    def test_decoded_document_is_a_copy(self):
        raw = {"holds": [{"no": 1, "cbm": 5400}]}
        decoded = decode_document(raw)
        raw["holds"][0]["cbm"] = 0
        assert decoded == {"holds": [{"no": 1, "cbm": 5400}]}
