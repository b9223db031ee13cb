"""Observability – structured logging."""
from hooksig.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    configure_logging,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
