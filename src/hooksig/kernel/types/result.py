"""Result type for operations whose failures are expected outcomes.

``Ok`` wraps a value, ``Err`` wraps an exception instance. Both support
structural pattern matching::

    match verify(secret, header, body):
        case Ok(True): ...
        case Ok(False): ...
        case Err(MissingSignatureError()): ...
"""

from __future__ import annotations

from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


class Ok(Generic[T]):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


class Err(Generic[E]):
    __slots__ = ("error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self.error = error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error, for callers that prefer exceptions."""
        raise self.error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]

__all__ = ["Err", "Ok", "Result"]
