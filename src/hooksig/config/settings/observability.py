"""Config settings – LoggingSettings (``HOOKSIG_LOG_*``)."""
from __future__ import annotations

import dataclasses
import logging

from hooksig.config.settings.base import Settings
from hooksig.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class LoggingSettings(Settings):
    """Level and renderer for :func:`hooksig.observability.configure_logging`."""

    _prefix: dataclasses.ClassVar[str] = "HOOKSIG_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        if self.level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("level", self.level, "not a logging level name")

    @property
    def numeric_level(self) -> int:
        return logging.getLevelNamesMapping()[self.level.upper()]


__all__ = ["LoggingSettings"]
