"""Kernel – framework-agnostic building blocks: errors, Result, clocks."""

from hooksig.kernel.errors import (
    BaseError,
    HeaderError,
    MalformedPairError,
    MissingFieldError,
    MissingSignatureError,
    MissingTimestampError,
    VerifyError,
)
from hooksig.kernel.types import Err, Ok, Result

__all__ = [
    "BaseError",
    "Err",
    "HeaderError",
    "MalformedPairError",
    "MissingFieldError",
    "MissingSignatureError",
    "MissingTimestampError",
    "Ok",
    "Result",
    "VerifyError",
]
