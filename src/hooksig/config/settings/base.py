"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Settings:
    """Immutable settings read from ``<_prefix>_<FIELD>`` environment variables.

    Subclasses declare dataclass fields and may override :meth:`_validate`,
    which runs once the instance is built.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()


__all__ = ["Settings"]
