"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from hooksig.config.settings import EnvSettingsLoader, LoggingSettings, SettingsLoader
from hooksig.observability.logging.filters import SensitiveFieldsFilter


class JsonLoggerFactory:
    """Configure structlog on top of stdlib logging."""

    @staticmethod
    def configure(
        settings: LoggingSettings | None = None,
        sensitive_fields: frozenset[str] | None = None,
    ) -> None:
        settings = settings or LoggingSettings()
        shared_processors: list[Any] = [
            SensitiveFieldsFilter(sensitive_fields),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if settings.json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(settings.numeric_level)


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    loader: SettingsLoader | None = None,
) -> LoggingSettings:
    """Configure logging and return the settings applied.

    Without explicit *settings* they are read through *loader*
    (``EnvSettingsLoader`` by default, i.e. ``HOOKSIG_LOG_LEVEL`` and
    ``HOOKSIG_LOG_JSON``).
    """
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(LoggingSettings)
    JsonLoggerFactory.configure(settings)
    return settings


__all__ = ["JsonLoggerFactory", "configure_logging"]
