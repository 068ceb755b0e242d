"""Function Validators

Validators for values that are themselves callables. Only the declared
signature is inspected; the callable is never invoked.

    a_parser = a_function.that_accepts(a_string).and_returns(a_number)
    a_parser.validate(len)                   # ok: len(obj) takes one argument
    a_parser.validate(lambda a, b: a + b)    # fails: accepts 2 parameters
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass, replace
from typing import Any, Callable, NamedTuple

from .context import ValidationContext, type_name
from .validators import Validator


class Arity(NamedTuple):
    """Positional-call capacity of a callable's signature."""
    required: int
    declared: int
    variadic: bool
    keyword_required: bool

    def accepts(self, count: int) -> bool:
        if self.keyword_required: return False
        return self.required <= count and (self.variadic or count <= self.declared)

    def __str__(self) -> str:
        count = f"{self.declared}{'+' if self.variadic else ''}"
        return f"{count} (plus required keyword arguments)" if self.keyword_required else count


def arity_of(fn: Callable[..., Any]) -> Arity | None:
    """Inspect ``fn``'s signature; None when it cannot be determined."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    required = declared = 0
    variadic = keyword_required = False
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            declared += 1
            if parameter.default is parameter.empty: required += 1
        elif parameter.kind is parameter.VAR_POSITIONAL:
            variadic = True
        elif parameter.kind is parameter.KEYWORD_ONLY and parameter.default is parameter.empty:
            keyword_required = True
    return Arity(required, declared, variadic, keyword_required)


def _parameters(count: int) -> str: return f"{count} parameter{'' if count == 1 else 's'}"


@dataclass(frozen=True, eq=False, repr=False)
class FunctionValidator(Validator[Callable[..., Any]]):
    """Callable, optionally constrained to a positional arity.

    ``parameters`` and ``return_validator`` describe the expected contract;
    only the parameter count is checked at runtime.
    """
    parameters: tuple[Validator[Any], ...] | None = None
    return_validator: Validator[Any] | None = None

    def that_accepts(self, *parameters: Validator[Any]) -> FunctionValidator:
        return replace(self, parameters=tuple(parameters))

    def and_returns(self, validator: Validator[Any]) -> FunctionValidator:
        return replace(self, return_validator=validator)

    @property
    def description(self) -> str:
        params = "..." if self.parameters is None else ", ".join(p.description for p in self.parameters)
        returns = self.return_validator.description if self.return_validator is not None else "any"
        return f"({params}) -> {returns}"

    def check(self, value: Any, context: ValidationContext) -> Callable[..., Any]:
        if isinstance(value, Validator) or not callable(value):
            return context.fail(f"expected a function, not {type_name(value)}")
        if self.parameters is None: return value

        expected = len(self.parameters)
        if (arity := arity_of(value)) is None:
            return context.fail(f"expected a function accepting {_parameters(expected)}, not one with an unknown signature")
        if not arity.accepts(expected):
            return context.fail(f"expected a function accepting {_parameters(expected)}, not one accepting {arity}")
        return value


a_function = FunctionValidator()
