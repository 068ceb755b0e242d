"""Object Validation

``an_object`` maps property names to validators. A property validator may be
given as a zero-argument function returning the validator, which lets a
schema refer to itself (or to a sibling defined later):

    a_list = an_object({
        "value": a_number,
        "next": lambda: a_list.or_null,
    })

Thunks are resolved on every visit. A cyclic input under a self-referential
schema recurses until the interpreter's recursion limit.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .context import UNDEFINED, ValidationContext, type_name
from .validators import Validator

T = TypeVar("T")

ThunkValidator = Union[Validator[T], Callable[[], Validator[T]]]


@dataclass(frozen=True, slots=True)
class Direct(Generic[T]):
    """A validator available at construction time."""
    validator: Validator[T]

    def resolve(self) -> Validator[T]: return self.validator


@dataclass(frozen=True, slots=True)
class Deferred(Generic[T]):
    """A validator produced by a factory on each use."""
    factory: Callable[[], Validator[T]]

    def resolve(self) -> Validator[T]:
        if not isinstance(validator := self.factory(), Validator):
            raise TypeError(f"validator factory {self.factory!r} returned {type_name(validator)}, not a validator")
        return validator


Thunk = Union[Direct[T], Deferred[T]]


def as_thunk(entry: ThunkValidator[T]) -> Thunk[T]:
    """Classify a schema entry once, at construction time."""
    if isinstance(entry, Validator): return Direct(entry)
    if callable(entry): return Deferred(entry)
    raise TypeError(f"expected a validator or a function returning one, not {type_name(entry)}")


@dataclass(frozen=True, eq=False, repr=False)
class ObjectValidator(Validator[Mapping[str, Any]]):
    """Mapping with a fixed set of declared properties.

    - Properties are visited in declaration order.
    - A property that is absent from the input and validates to UNDEFINED is
      left out of the result rather than added with an UNDEFINED value.
    - Undeclared properties fail unless ``allow_extra_properties`` is set, in
      which case they are copied through.
    - The input mapping itself is returned when nothing changed.
    """
    fields: tuple[tuple[str, Thunk[Any]], ...]
    keys: frozenset[str]

    def __init__(self, validators: Mapping[str, ThunkValidator[Any]]):
        if bad := [k for k in validators if not isinstance(k, str)]:
            raise TypeError(f"property names must be strings: {bad!r}")
        object.__setattr__(self, "fields", tuple((key, as_thunk(entry)) for key, entry in validators.items()))
        object.__setattr__(self, "keys", frozenset(validators))

    @property
    def description(self) -> str: return "{" + ", ".join(key for key, _ in self.fields) + "}"

    def check(self, value: Any, context: ValidationContext) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            return context.fail(f"expected an object, not {type_name(value)}")

        result: dict[str, Any] = {}
        changed = False

        for key, thunk in self.fields:
            validator = thunk.resolve()
            raw = value.get(key, UNDEFINED)
            with context.path.key(key):
                validated = validator.check(raw, context)
            if validated is UNDEFINED and key not in value:
                continue
            result[key] = validated
            changed = changed or validated is not raw

        for key in value:
            if key in self.keys: continue
            if not context.options.allow_extra_properties:
                return context.fail(f'unexpected property "{key}"')
            result[key] = value[key]
            changed = True

        return result if changed else value


def an_object(validators: Mapping[str, ThunkValidator[Any]] | None = None, /,
              **properties: ThunkValidator[Any]) -> ObjectValidator:
    """Build an object validator from a mapping and/or keyword arguments.

    Usage:
        a_phone = an_object(phoneNumber=a_string, phoneType=a_string_union("Home", "Mobile"))
        a_person = an_object({"name": a_string, "phones": a_phone.array.or_undefined})
    """
    return ObjectValidator({**(validators or {}), **properties})
