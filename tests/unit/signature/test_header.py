"""Unit tests for signature header parsing."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime

import pytest

from hooksig.kernel.errors import HeaderError, MalformedPairError
from hooksig.signature import SignatureHeader, parse_signature_header


# ---------------------------------------------------------------------------
# parse_signature_header — accepted headers
# ---------------------------------------------------------------------------
class TestParseAccepted:
    def test_timestamp_and_signature(self):
        result = parse_signature_header("t=1,v1=abc")
        assert result.is_ok()
        assert dict(result.unwrap()) == {"t": "1", "v1": "abc"}

    def test_unknown_keys_are_kept(self):
        header = parse_signature_header("t=1,v1=abc,v0=def").unwrap()
        assert dict(header) == {"t": "1", "v1": "abc", "v0": "def"}

    def test_timestamp_only(self):
        assert dict(parse_signature_header("t=1").unwrap()) == {"t": "1"}

    def test_whitespace_is_trimmed(self):
        header = parse_signature_header(" t = 1 , v1 = abc ").unwrap()
        assert dict(header) == {"t": "1", "v1": "abc"}

    def test_empty_value_is_a_pair(self):
        header = parse_signature_header("t=1,v1=abc,v0=").unwrap()
        assert header["v0"] == ""

    def test_repeated_key_keeps_last_value(self):
        header = parse_signature_header("t=1,v1=first,v1=second").unwrap()
        assert header["v1"] == "second"

    def test_timestamp_text_is_verbatim(self):
        assert parse_signature_header("t=0001,v1=x").unwrap().timestamp == "0001"


# ---------------------------------------------------------------------------
# parse_signature_header — rejected headers
# ---------------------------------------------------------------------------
class TestParseRejected:
    @pytest.mark.parametrize(
        ("header", "segment_index"),
        [
            ("garbage", 0),
            ("t=1=2,v1=abc", 0),
            ("t=1,v1=abc==", 1),
            ("t=1,v1=abc,", 2),
            ("", 0),
            ("   ", 0),
            ("t=1,,v1=abc", 1),
        ],
    )
    def test_malformed_pair(self, header, segment_index):
        result = parse_signature_header(header)
        assert result.is_err()
        assert isinstance(result.error, MalformedPairError)
        assert result.error.segment_index == segment_index

    def test_malformed_pair_is_header_error(self):
        assert isinstance(parse_signature_header("garbage").error, HeaderError)

    def test_error_does_not_echo_segment(self):
        error = parse_signature_header("t=1,v1=deadbeef=").error
        assert "deadbeef" not in str(error)

    def test_value_with_base64_padding_is_rejected(self):
        # values containing '=' are not split on the first '='
        assert parse_signature_header("t=1,v1=YWJj=").is_err()


# ---------------------------------------------------------------------------
# SignatureHeader
# ---------------------------------------------------------------------------
class TestSignatureHeader:
    def test_is_a_mapping(self):
        header = SignatureHeader({"t": "1", "v1": "abc"})
        assert isinstance(header, Mapping)
        assert len(header) == 2
        assert set(header) == {"t", "v1"}
        assert header.get("v0") is None

    def test_is_immutable_copy(self):
        source = {"t": "1"}
        header = SignatureHeader(source)
        source["t"] = "2"
        assert header["t"] == "1"
        with pytest.raises(TypeError):
            header["t"] = "3"  # type: ignore[index]

    def test_accessors(self):
        header = SignatureHeader({"t": "12", "v1": "abc"})
        assert header.timestamp == "12"
        assert header.signature == "abc"

    def test_accessors_absent(self):
        header = SignatureHeader({"v0": "x"})
        assert header.timestamp is None
        assert header.signature is None
        assert header.issued_at is None

    def test_issued_at_decodes_epoch_seconds(self):
        header = SignatureHeader({"t": "1767268800"})
        assert header.issued_at == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    @pytest.mark.parametrize("raw", ["", "abc", "-5", "1.5", "99999999999999999999999", "\u0661\u0662", "\u00b2"])
    def test_issued_at_none_for_unusable_timestamp(self, raw):
        assert SignatureHeader({"t": raw}).issued_at is None

    def test_repr_lists_keys_not_values(self):
        text = repr(SignatureHeader({"t": "1", "v1": "secretsig"}))
        assert "secretsig" not in text
        assert "v1" in text
