"""Unit tests for kernel Result type."""

from __future__ import annotations

import pytest

from hooksig.kernel.errors import MissingSignatureError, VerifyError
from hooksig.kernel.types import Err, Ok


# ---------------------------------------------------------------------------
# Result monad
# ---------------------------------------------------------------------------


class TestResultMonad:
    def test_ok_unwrap(self) -> None:
        ok = Ok(42)
        assert ok.unwrap() == 42
        assert ok.value == 42

    def test_ok_is_ok(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_err_unwrap_raises_carried_error(self) -> None:
        err = Err(MissingSignatureError())
        with pytest.raises(MissingSignatureError):
            err.unwrap()

    def test_err_is_err(self) -> None:
        assert Err(ValueError()).is_err()
        assert not Err(ValueError()).is_ok()

    def test_repr(self) -> None:
        assert repr(Ok(1)) == "Ok(1)"
        assert "Err" in repr(Err(ValueError("x")))

    def test_structural_pattern_matching(self) -> None:
        def describe(result: object) -> str:
            match result:
                case Ok(True):
                    return "valid"
                case Ok(False):
                    return "rejected"
                case Err(MissingSignatureError()):
                    return "no signature"
                case Err(VerifyError()):
                    return "bad header"
            return "unknown"

        assert describe(Ok(True)) == "valid"
        assert describe(Ok(False)) == "rejected"
        assert describe(Err(MissingSignatureError())) == "no signature"
        assert describe(Err(VerifyError("x"))) == "bad header"
