"""Validation Context

Per-traversal state threaded through every validator call:
- PathContext: stack of keys/indices leading to the value being checked
- ValidationOptions: immutable switches read by validators
- ValidationContext: owns both, and raises failures with the current path

A context is created by the public entry points when the caller does not
supply one. It must never be shared between concurrent traversals.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, NoReturn

from shapeguard.config import Settings, get_settings
from .errors import ValidationError


class _Undefined:
    """Marker for "present but undefined", distinct from ``None`` (null)."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "UNDEFINED"

    def __bool__(self) -> bool: return False

    def __reduce__(self) -> str: return "UNDEFINED"

    def __copy__(self) -> _Undefined: return self

    def __deepcopy__(self, memo: dict) -> _Undefined: return self


UNDEFINED = _Undefined()


def type_name(value: Any) -> str:
    """Describe a value's kind for error messages."""
    if value is None: return "null"
    if value is UNDEFINED: return "undefined"
    if isinstance(value, (list, tuple)): return "an array"
    if isinstance(value, Mapping): return "an object"
    if isinstance(value, bool): return "a boolean"
    if isinstance(value, (int, float)): return "a number"
    if isinstance(value, str): return "a string"
    if callable(value): return "a function"
    return f"a {type(value).__name__}"


@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Switches passed unchanged to every validator in one traversal."""
    allow_extra_properties: bool = False

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ValidationOptions:
        settings = settings or get_settings()
        return cls(allow_extra_properties=settings.ALLOW_EXTRA_PROPERTIES)


class PathContext:
    """Ordered stack of path segments (object keys or stringified indices)."""

    __slots__ = ("_segments",)

    def __init__(self):
        self._segments: list[str] = []

    def push(self, segment: str | int) -> None: self._segments.append(str(segment))

    def pop(self) -> str: return self._segments.pop()

    def current(self) -> str: return ".".join(self._segments)

    @property
    def segments(self) -> tuple[str, ...]: return tuple(self._segments)

    @contextmanager
    def key(self, segment: str | int) -> Iterator[None]:
        """Push ``segment`` for the duration of the block, popping even when it raises."""
        self.push(segment)
        try:
            yield
        finally:
            self.pop()


class ValidationContext:
    """Carrier of path state, options and the failure operation for one traversal."""

    __slots__ = ("path", "options")

    def __init__(self, options: ValidationOptions | None = None, path: PathContext | None = None):
        self.options = options if options is not None else ValidationOptions.from_settings()
        self.path = path if path is not None else PathContext()

    def fail(self, message: str) -> NoReturn:
        raise ValidationError(message, self.path.segments)

    @staticmethod
    def type_name(value: Any) -> str: return type_name(value)


def make_context(options: ValidationOptions | None = None) -> ValidationContext:
    """Create a fresh context for a top-level validation call."""
    return ValidationContext(options)
