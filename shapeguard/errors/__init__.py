"""Error handling primitives.

Validation failures are raised as ``ValidationError``; boundary helpers that
prefer values over exceptions wrap outcomes in ``Ok``/``Err``.
"""
from .types import Result, Ok, Err

__all__ = ["Result", "Ok", "Err"]
