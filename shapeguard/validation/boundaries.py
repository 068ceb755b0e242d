"""Validation at System Boundaries

Parse-don't-validate helpers for data crossing into the program:
- ``parse``: one payload to ``Ok(value)`` / ``Err(ValidationError)``
- ``parse_batch``: many payloads, all errors collected and re-rooted by index
- ``validate_returns``: decorator validating what a function returns
"""
from __future__ import annotations

import inspect
from collections.abc import Iterable
from functools import wraps
from typing import Any, Callable, TypeVar

from shapeguard.errors import Err, Ok, Result
from shapeguard.logging import boundary_logger
from .context import ValidationOptions
from .errors import ValidationError
from .validators import Validator

T = TypeVar("T")


# ============================================================================
# Functional Boundary Parsers
# ============================================================================

def parse(validator: Validator[T], data: Any, options: ValidationOptions | None = None) -> Result[T, ValidationError]:
    """Validate ``data`` without raising.

    Usage:
        result = parse(a_person, json.loads(body))
        if result.is_err():
            return error_response(result.unwrap_err().to_dict())
        person = result.unwrap()
    """
    try: return Ok(validator.validate(data, options))
    except ValidationError as e: return Err(e)


def parse_batch(
    validator: Validator[T],
    items: Iterable[Any],
    options: ValidationOptions | None = None,
) -> Result[list[T], list[ValidationError]]:
    """Validate every item; errors are prefixed with the item's index."""
    values: list[T] = []
    errors: list[ValidationError] = []

    for index, item in enumerate(items):
        match parse(validator, item, options):
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error.with_prefix(str(index)))

    if errors:
        boundary_logger().info(
            "batch_validation_failed",
            validator=validator.description,
            total=len(values) + len(errors),
            failed=len(errors),
            first_error=errors[0].message,
        )
        return Err(errors)
    return Ok(values)


# ============================================================================
# Decorator-based Boundary Validation
# ============================================================================

def _checked_return(func: Callable, validator: Validator[T], value: Any, options: ValidationOptions | None) -> T:
    try:
        return validator.validate(value, options)
    except ValidationError as e:
        boundary_logger().warning(
            "return_validation_failed",
            function=func.__qualname__,
            path=e.dotted_path,
            reason=e.reason,
        )
        raise


def validate_returns(validator: Validator[T], options: ValidationOptions | None = None) -> Callable:
    """Decorator validating a function's return value (sync or async).

    Usage:
        @validate_returns(a_weather_report)
        async def fetch_weather(city: str):
            response = await http.get(f"/weather/{city}")
            return response.json()
    """
    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                return _checked_return(func, validator, await func(*args, **kwargs), options)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            return _checked_return(func, validator, func(*args, **kwargs), options)
        return wrapper
    return decorator
