"""Observability – structlog processor that masks credential-bearing keys."""
from __future__ import annotations

from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "secret", "signature", "v1", "v0", "payload",
    "authorization", "token", "password", "api_key",
})


class SensitiveFieldsFilter:
    """Mask values whose key (case-insensitive) names a secret.

    Nested dicts and lists of dicts are walked; the event dict is not mutated.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def _mask(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: self.REDACTED if str(k).lower() in self._fields else self._mask(v)
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [self._mask(item) for item in value]
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self._mask(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
