"""Composable Validation

Validators check loosely-typed values (e.g. the output of ``json.loads``)
against an expected shape and return them, unchanged where possible, or
raise ``ValidationError`` naming the offending path.

Usage:
    from shapeguard.validation import a_string, a_number, an_object, a_string_union

    a_phone = an_object({
        "phoneNumber": a_string,
        "phoneType": a_string_union("Home", "Business", "Mobile", "Unknown"),
    })
    a_person = an_object({"name": a_string, "phones": a_phone.array.or_undefined})

    person = a_person.validate(json.loads(body))   # raises on mismatch
    if a_person.is_valid(other): ...
"""

from .context import (
    UNDEFINED,
    PathContext,
    ValidationContext,
    ValidationOptions,
    make_context,
    type_name,
)
from .errors import ValidationError
from .validators import (
    Validator,
    OrNull,
    OrUndefined,
    ArrayOf,
    Or,
    Primitive,
    StringUnion,
    CustomValidator,
    a_string,
    a_number,
    a_boolean,
    a_string_literal,
    a_string_union,
    make_validator,
)
from .objects import (
    ThunkValidator,
    Direct,
    Deferred,
    ObjectValidator,
    an_object,
)
from .functions import Arity, FunctionValidator, a_function, arity_of
from .boundaries import parse, parse_batch, validate_returns

__all__ = [
    # Context
    "UNDEFINED",
    "PathContext",
    "ValidationContext",
    "ValidationOptions",
    "make_context",
    "type_name",
    # Errors
    "ValidationError",
    # Validators
    "Validator",
    "OrNull",
    "OrUndefined",
    "ArrayOf",
    "Or",
    "Primitive",
    "StringUnion",
    "CustomValidator",
    "a_string",
    "a_number",
    "a_boolean",
    "a_string_literal",
    "a_string_union",
    "make_validator",
    # Objects
    "ThunkValidator",
    "Direct",
    "Deferred",
    "ObjectValidator",
    "an_object",
    # Functions
    "Arity",
    "FunctionValidator",
    "a_function",
    "arity_of",
    # Boundaries
    "parse",
    "parse_batch",
    "validate_returns",
]
