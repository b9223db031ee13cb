"""Root error class for the hooksig error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Base for every error hooksig reports.

    ``code`` is a stable machine-readable slug and ``detail`` carries
    structured context that is safe to log (never secrets or signatures).
    """

    default_code: ClassVar[str] = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for log events and HTTP error bodies."""
        return {"code": self.code, "message": self.message, "detail": dict(self.detail)}


__all__ = ["BaseError"]
