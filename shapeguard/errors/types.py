"""Result Types

Ok/Err containers for callers that prefer values over exceptions at a
boundary. Both variants are frozen and support structural pattern matching:

    match parse(a_person, payload):
        case Ok(person):
            greet(person["name"])
        case Err(error):
            log.warning("bad_payload", path=error.dotted_path)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant: wraps the validated value."""
    value: T

    def is_ok(self) -> bool: return True

    def is_err(self) -> bool: return False

    def unwrap(self) -> T: return self.value

    def unwrap_or(self, default: T) -> T: return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the success value."""
        return Ok(f(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant: wraps the error (or errors) that stopped parsing."""
    error: E

    def is_ok(self) -> bool: return False

    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        """Raise the wrapped error if it is an exception, else a ValueError describing it."""
        if isinstance(self.error, BaseException): raise self.error
        raise ValueError(f"Called unwrap on Err: {self.error!r}")

    def unwrap_or(self, default: T) -> T: return default

    def unwrap_err(self) -> E: return self.error

    def map(self, f: Callable[[T], U]) -> Err[E]:
        """No-op for Err variant."""
        return self


Result = Union[Ok[T], Err[E]]
