"""Signature header – parse ``t=<ts>,v1=<hex>[,v0=<legacy>]`` into a mapping.

Each comma-separated segment must split on ``=`` into *exactly* two tokens.
Values containing ``=`` are therefore rejected rather than split on the first
``=``; this matches the upstream provider's reference verifier.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import UTC, datetime

from hooksig.kernel.errors import MalformedPairError
from hooksig.kernel.types import Err, Ok, Result

__all__ = ["SIGNATURE_KEY", "TIMESTAMP_KEY", "SignatureHeader", "parse_signature_header"]

TIMESTAMP_KEY = "t"
SIGNATURE_KEY = "v1"


class SignatureHeader(Mapping[str, str]):
    """Immutable view of the parsed ``key=value`` pairs of a signature header."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values: dict[str, str] = dict(values)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SignatureHeader(keys={sorted(self._values)!r})"

    @property
    def timestamp(self) -> str | None:
        """Raw ``t`` value, exactly as sent."""
        return self._values.get(TIMESTAMP_KEY)

    @property
    def signature(self) -> str | None:
        """Raw ``v1`` value, exactly as sent."""
        return self._values.get(SIGNATURE_KEY)

    @property
    def issued_at(self) -> datetime | None:
        """``t`` decoded as a UTC datetime.

        ``None`` when ``t`` is absent or is not a plain decimal number of
        seconds. Enforcing a tolerance window is left to the caller.
        """
        raw = self.timestamp
        if raw is None or not (raw.isascii() and raw.isdigit()):
            return None
        try:
            return datetime.fromtimestamp(int(raw), tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None


def parse_signature_header(header: str) -> Result[SignatureHeader, MalformedPairError]:
    """Split *header* into a :class:`SignatureHeader`.

    Returns ``Err(MalformedPairError)`` for the first segment that is not a
    single ``key=value`` pair, which includes an empty header.
    """
    values: dict[str, str] = {}
    for index, segment in enumerate(header.strip().split(",")):
        tokens = [token.strip() for token in segment.split("=")]
        if len(tokens) != 2:
            return Err(MalformedPairError(index))
        key, value = tokens
        values[key] = value
    return Ok(SignatureHeader(values))
