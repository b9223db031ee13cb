"""Signature verifier – parse, rebuild the signed string, compare in constant time."""
from __future__ import annotations

import hmac

from hooksig.kernel.errors import MissingSignatureError, MissingTimestampError, VerifyError
from hooksig.kernel.types import Err, Ok, Result
from hooksig.observability.logging import get_logger
from hooksig.signature.computer import compute_signature, to_wire_bytes
from hooksig.signature.header import SignatureHeader, parse_signature_header

__all__ = ["Verifier", "signed_string", "verify"]

logger = get_logger(__name__)


def signed_string(timestamp: str, payload: str | bytes) -> bytes:
    """UTF-8 bytes of ``"<timestamp>.<payload>"``, the exact HMAC input."""
    return to_wire_bytes(timestamp) + b"." + to_wire_bytes(payload)


class Verifier:
    """Checks webhook payloads against a ``t=...,v1=...`` signature header.

    A wrong signature is a normal outcome (``Ok(False)``); only a header that
    cannot be evaluated produces an ``Err``. The verifier keeps no state, so
    one instance may be shared between threads.
    """

    __slots__ = ()

    def verify(
        self,
        secret: str | bytes,
        header: str,
        payload: str | bytes,
    ) -> Result[bool, VerifyError]:
        """Verify *payload* (the raw request body) against *header*."""
        parsed = parse_signature_header(header)
        if isinstance(parsed, Err):
            logger.debug("signature_header.malformed", segment_index=parsed.error.segment_index)
            return parsed
        return self.check(secret, parsed.value, payload)

    def check(
        self,
        secret: str | bytes,
        header: SignatureHeader,
        payload: str | bytes,
    ) -> Result[bool, VerifyError]:
        """Verify against an already parsed header.

        Useful when the caller inspects :attr:`SignatureHeader.issued_at`
        before deciding whether to verify at all.
        """
        timestamp = header.timestamp
        if timestamp is None:
            logger.debug("signature_header.missing_field", field=MissingTimestampError.field_name)
            return Err(MissingTimestampError())
        received = header.signature
        if received is None:
            logger.debug("signature_header.missing_field", field=MissingSignatureError.field_name)
            return Err(MissingSignatureError())

        expected = compute_signature(signed_string(timestamp, payload), secret)
        matched = hmac.compare_digest(expected.encode("ascii"), to_wire_bytes(received))
        if not matched:
            logger.debug("signature.mismatch", header_timestamp=timestamp)
        return Ok(matched)


def verify(
    secret: str | bytes,
    header: str,
    payload: str | bytes,
) -> Result[bool, VerifyError]:
    """Verify *payload* against *header*.

    >>> verify(b"whsec", "t=1,v1=00", "{}").unwrap()
    False
    """
    return Verifier().verify(secret, header, payload)
