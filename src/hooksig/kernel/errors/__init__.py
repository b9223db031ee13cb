"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── VerifyError                  (verification.py)
        ├── HeaderError
        │   └── MalformedPairError
        └── MissingFieldError
            ├── MissingTimestampError
            └── MissingSignatureError

Configuration errors (``hooksig.config.validation``) also derive from
``BaseError``.
"""

from hooksig.kernel.errors.base import BaseError
from hooksig.kernel.errors.verification import (
    HeaderError,
    MalformedPairError,
    MissingFieldError,
    MissingSignatureError,
    MissingTimestampError,
    VerifyError,
)

__all__ = [
    "BaseError",
    "HeaderError",
    "MalformedPairError",
    "MissingFieldError",
    "MissingSignatureError",
    "MissingTimestampError",
    "VerifyError",
]
