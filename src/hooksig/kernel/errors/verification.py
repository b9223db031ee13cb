"""Verification errors — structural problems with a signature header.

A signature that simply does not match is *not* an error; the verifier
reports it as ``Ok(False)``.
"""

from __future__ import annotations

from typing import Any

from hooksig.kernel.errors.base import BaseError


class VerifyError(BaseError):
    """The header could not be evaluated at all."""

    default_code = "verify_error"


class HeaderError(VerifyError):
    """The signature header is not well formed."""

    default_code = "header_error"


class MalformedPairError(HeaderError):
    """A header segment did not split into exactly one key and one value.

    Only the segment position is recorded; the segment text may carry a
    signature and is kept out of the error payload.
    """

    default_code = "malformed_pair"

    def __init__(self, segment_index: int, **kwargs: Any) -> None:
        super().__init__(
            f"Header segment {segment_index} is not a key=value pair",
            detail={"segment_index": segment_index},
            **kwargs,
        )
        self.segment_index = segment_index


class MissingFieldError(VerifyError):
    """A required scheme key is absent from the parsed header."""

    default_code = "missing_field"
    field_name: str = ""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Signature header has no '{self.field_name}' field",
            detail={"field": self.field_name},
            **kwargs,
        )


class MissingTimestampError(MissingFieldError):
    """The parsed header lacks the ``t`` field."""

    default_code = "missing_timestamp"
    field_name = "t"


class MissingSignatureError(MissingFieldError):
    """The parsed header lacks the ``v1`` field."""

    default_code = "missing_signature"
    field_name = "v1"


__all__ = [
    "HeaderError",
    "MalformedPairError",
    "MissingFieldError",
    "MissingSignatureError",
    "MissingTimestampError",
    "VerifyError",
]
