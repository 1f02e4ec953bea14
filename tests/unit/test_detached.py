"""Tests for jws_ld_proof.detached — detached JWS codec."""
from __future__ import annotations

import pytest

from jws_ld_proof.detached import (
    DetachedJws,
    build_signing_input,
    decode_jws,
    decode_signature,
    encode_jws,
)
from jws_ld_proof.errors import FormatError


# ---------------------------------------------------------------------------
# build_signing_input()
# ---------------------------------------------------------------------------


class TestBuildSigningInput:
    def test_concatenates_header_dot_and_raw_payload(self) -> None:
        assert build_signing_input("abc", b"\x00\xffpayload") == b"abc.\x00\xffpayload"

    def test_length_is_header_plus_one_plus_payload(self) -> None:
        verify_data = bytes(range(256))
        data = build_signing_input("eyJhbGciOiJFZERTQSJ9", verify_data)
        assert len(data) == len("eyJhbGciOiJFZERTQSJ9") + 1 + len(verify_data)

    def test_payload_is_not_base64_encoded(self) -> None:
        data = build_signing_input("h", b"hello")
        assert data.endswith(b".hello")

    def test_empty_payload(self) -> None:
        assert build_signing_input("h", b"") == b"h."

    def test_accepts_bytearray(self) -> None:
        assert build_signing_input("h", bytearray(b"xy")) == b"h.xy"


# ---------------------------------------------------------------------------
# encode_jws()
# ---------------------------------------------------------------------------


class TestEncodeJws:
    def test_double_dot_marks_detached_payload(self) -> None:
        assert encode_jws("header", b"a") == "header..YQ"

    def test_signature_is_unpadded_base64url(self) -> None:
        jws = encode_jws("h", b"\xfb\xff")
        assert jws == "h..-_8"
        assert "=" not in jws


# ---------------------------------------------------------------------------
# decode_jws()
# ---------------------------------------------------------------------------


class TestDecodeJws:
    def test_returns_header_and_signature(self) -> None:
        assert decode_jws("head..sig") == DetachedJws("head", "sig")

    def test_payload_segment_is_ignored(self) -> None:
        assert decode_jws("head.payload.sig") == DetachedJws("head", "sig")

    def test_no_dot_raises(self) -> None:
        with pytest.raises(FormatError):
            decode_jws("nodots")

    def test_two_segments_raises(self) -> None:
        with pytest.raises(FormatError, match="3 dot-separated segments"):
            decode_jws("head.sig")

    def test_four_segments_raises(self) -> None:
        with pytest.raises(FormatError):
            decode_jws("a.b.c.d")

    def test_empty_header_raises(self) -> None:
        with pytest.raises(FormatError, match="header segment is empty"):
            decode_jws("..sig")

    def test_empty_signature_raises(self) -> None:
        with pytest.raises(FormatError, match="signature segment is empty"):
            decode_jws("head..")

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_jws("nodots")


class TestDecodeSignature:
    def test_decodes_base64url(self) -> None:
        assert decode_signature("YWI") == b"ab"

    def test_malformed_raises_format_error(self) -> None:
        with pytest.raises(FormatError, match="not base64url"):
            decode_signature("a+b/")
