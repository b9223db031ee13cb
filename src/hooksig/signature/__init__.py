"""Webhook signatures – header parsing, HMAC computation and verification."""
from hooksig.signature.computer import compute_signature, to_wire_bytes
from hooksig.signature.header import (
    SIGNATURE_KEY,
    TIMESTAMP_KEY,
    SignatureHeader,
    parse_signature_header,
)
from hooksig.signature.verifier import Verifier, signed_string, verify

__all__ = [
    "SIGNATURE_KEY",
    "TIMESTAMP_KEY",
    "SignatureHeader",
    "Verifier",
    "compute_signature",
    "parse_signature_header",
    "signed_string",
    "to_wire_bytes",
    "verify",
]
