"""
hooksig – verify HMAC-SHA256 signed webhook payloads.

Headers follow the ``t=<timestamp>,v1=<hex-hmac>[,v0=...]`` scheme::

    from hooksig import MissingSignatureError, verify

    result = verify(secret, request.headers["Stripe-Signature"], raw_body)
    if result.is_err():
        ...  # header could not be evaluated
    elif not result.value:
        ...  # wrong secret or tampered payload
"""

from hooksig.kernel import (
    BaseError,
    Err,
    HeaderError,
    MalformedPairError,
    MissingFieldError,
    MissingSignatureError,
    MissingTimestampError,
    Ok,
    Result,
    VerifyError,
)
from hooksig.signature import (
    SignatureHeader,
    Verifier,
    compute_signature,
    parse_signature_header,
    verify,
)

__version__ = "0.1.0"
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
    "SignatureHeader",
    "Verifier",
    "VerifyError",
    "__version__",
    "compute_signature",
    "parse_signature_header",
    "verify",
]
