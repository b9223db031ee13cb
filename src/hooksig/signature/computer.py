"""Signature computer – HMAC-SHA256 rendered as lowercase hex."""
from __future__ import annotations

import hashlib
import hmac

__all__ = ["to_wire_bytes", "compute_signature"]


def to_wire_bytes(value: str | bytes) -> bytes:
    """UTF-8 bytes of *value*; ``bytes`` pass through untouched.

    Lone surrogates (text decoded with ``surrogateescape``) are encoded rather
    than rejected, so any ``str`` yields bytes.
    """
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    return bytes(value)


def compute_signature(payload: str | bytes, secret: str | bytes) -> str:
    """Return the 64-character hex HMAC-SHA256 of *payload* keyed by *secret*.

    Keys of any length are accepted (HMAC hashes or pads them internally).
    """
    mac = hmac.new(to_wire_bytes(secret), to_wire_bytes(payload), hashlib.sha256)
    return mac.hexdigest()
