"""Compositional Validator System

Every validator turns an untyped value into a value of a known shape or
raises ``ValidationError``. Validators combine via derived properties and
operators:
- ``v.or_null`` / ``v.or_undefined``: also accept None / UNDEFINED
- ``v.array``: a list or tuple whose items all satisfy ``v``
- ``a | b`` (or ``a.or_(b)``): try ``a``, then ``b``

Features:
- Frozen dataclass validators, safe to share between threads
- Derived validators built once per instance, then stable
- Identity preservation: unchanged inputs are returned as-is
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Generic, TypeGuard, TypeVar

from shapeguard.logging import validation_logger
from .context import UNDEFINED, ValidationContext, ValidationOptions, make_context, type_name
from .errors import ValidationError

T = TypeVar("T")
U = TypeVar("U")


class Validator(ABC, Generic[T]):
    """Base class for all validators.

    Subclasses implement ``check``, which runs inside an existing traversal.
    ``validate`` and ``is_valid`` are the public entry points and are the only
    places a fresh context is created.
    """

    @abstractmethod
    def check(self, value: Any, context: ValidationContext) -> T:
        """Validate ``value`` within the traversal owning ``context``."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable shape description."""

    def validate(self, value: Any, options: ValidationOptions | None = None,
                 context: ValidationContext | None = None) -> T:
        """Return the validated value or raise ``ValidationError``.

        A supplied ``context`` keeps its own options; ``options`` only applies
        to the fresh context created when none is given.
        """
        if context is not None: return self.check(value, context)
        try:
            return self.check(value, make_context(options))
        except ValidationError as e:
            validation_logger().debug("validation_failed", validator=self.description, path=e.dotted_path, reason=e.reason)
            raise

    def is_valid(self, value: Any, options: ValidationOptions | None = None) -> TypeGuard[T]:
        """True if ``value`` validates. Only ``ValidationError`` counts as rejection."""
        try:
            self.check(value, make_context(options))
        except ValidationError:
            return False
        return True

    @cached_property
    def or_null(self) -> Validator[T | None]: return OrNull(self)

    @cached_property
    def or_undefined(self) -> Validator[T]: return OrUndefined(self)

    @cached_property
    def array(self) -> Validator[Sequence[T]]: return ArrayOf(self)

    def or_(self, other: Validator[U]) -> Validator[T | U]: return Or(self, other)

    def __or__(self, other: Validator[U]) -> Validator[T | U]: return Or(self, other)

    def __repr__(self) -> str: return f"<{type(self).__name__} {self.description}>"


# ============================================================================
# Wrappers
# ============================================================================

@dataclass(frozen=True, eq=False, repr=False)
class OrNull(Validator[T | None]):
    """Accept None unchanged, otherwise delegate."""
    inner: Validator[T]

    @property
    def description(self) -> str: return f"{self.inner.description} | null"

    def check(self, value: Any, context: ValidationContext) -> T | None:
        if value is None: return None
        return self.inner.check(value, context)


@dataclass(frozen=True, eq=False, repr=False)
class OrUndefined(Validator[T]):
    """Accept UNDEFINED unchanged, otherwise delegate."""
    inner: Validator[T]

    @property
    def description(self) -> str: return f"{self.inner.description} | undefined"

    def check(self, value: Any, context: ValidationContext) -> T:
        if value is UNDEFINED: return value
        return self.inner.check(value, context)


@dataclass(frozen=True, eq=False, repr=False)
class ArrayOf(Validator[Sequence[T]]):
    """List or tuple whose items all satisfy ``item``.

    Returns the input sequence itself when no item was changed by its
    validator, otherwise a new list in the same order.
    """
    item: Validator[T]

    @property
    def description(self) -> str: return f"array of {self.item.description}"

    def check(self, value: Any, context: ValidationContext) -> Sequence[T]:
        if not isinstance(value, (list, tuple)):
            return context.fail(f"expected an array, not {type_name(value)}")

        result: list[T] = []
        changed = False
        for index, item in enumerate(value):
            with context.path.key(index):
                validated = self.item.check(item, context)
            result.append(validated)
            changed = changed or validated is not item

        return result if changed else value


# ============================================================================
# Combinators
# ============================================================================

@dataclass(frozen=True, eq=False, repr=False)
class Or(Validator[T | U]):
    """Union: ``left`` wins when it accepts; otherwise ``right`` decides.

    Only the right-hand failure is reported.
    """
    left: Validator[T]
    right: Validator[U]

    def __post_init__(self):
        for side in (self.left, self.right):
            if not isinstance(side, Validator):
                raise TypeError(f"union members must be validators, not {type_name(side)}")

    @property
    def description(self) -> str: return f"{self.left.description} | {self.right.description}"

    def check(self, value: Any, context: ValidationContext) -> T | U:
        try:
            return self.left.check(value, context)
        except ValidationError:
            return self.right.check(value, context)


# ============================================================================
# Primitive Validators
# ============================================================================

@dataclass(frozen=True, eq=False, repr=False)
class Primitive(Validator[T]):
    """Accept values of one runtime primitive kind, unchanged."""
    kind: str
    accepts: Callable[[Any], bool]

    @property
    def description(self) -> str: return self.kind

    def check(self, value: Any, context: ValidationContext) -> T:
        if self.accepts(value): return value
        return context.fail(f"expected a {self.kind}, not {type_name(value)}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


a_string: Validator[str] = Primitive("string", lambda value: isinstance(value, str))
a_number: Validator[int | float] = Primitive("number", _is_number)
a_boolean: Validator[bool] = Primitive("boolean", lambda value: isinstance(value, bool))


@dataclass(frozen=True, eq=False, repr=False)
class StringUnion(Validator[str]):
    """Accept exactly one of a fixed set of strings."""
    values: tuple[str, ...]

    def __post_init__(self):
        if not self.values: raise ValueError("a string union needs at least one value")
        if not all(isinstance(v, str) for v in self.values):
            raise TypeError(f"string union members must be strings: {self.values!r}")

    @property
    def description(self) -> str: return " | ".join(f'"{v}"' for v in self.values)

    def check(self, value: Any, context: ValidationContext) -> str:
        if isinstance(value, str) and value in self.values: return value
        return context.fail(f"expected {self.description}, not {type_name(value)}")


def a_string_union(*values: str) -> Validator[str]:
    """Usage: ``a_string_union("Home", "Business", "Mobile")``"""
    return StringUnion(tuple(values))


def a_string_literal(value: str) -> Validator[str]:
    return StringUnion((value,))


# ============================================================================
# Custom Validator
# ============================================================================

@dataclass(frozen=True, eq=False, repr=False)
class CustomValidator(Validator[T]):
    """Validator from a ``(value, context) -> T`` function.

    The function reports failures through ``context.fail`` and validates
    nested values with ``other.validate(item, context=context)``.
    """
    validator_fn: Callable[[Any, ValidationContext], T]
    name: str = "custom"

    @property
    def description(self) -> str: return self.name

    def check(self, value: Any, context: ValidationContext) -> T: return self.validator_fn(value, context)


def make_validator(fn: Callable[[Any, ValidationContext], T], name: str | None = None) -> Validator[T]:
    """Wrap a validation function; usable as a decorator.

    Usage:
        @make_validator
        def a_hex_string(value, context):
            if not isinstance(value, str) or not HEX.fullmatch(value):
                context.fail(f"expected a string of hex digits, not {context.type_name(value)}")
            return int(value, 16)
    """
    return CustomValidator(fn, name or getattr(fn, "__name__", "custom"))
