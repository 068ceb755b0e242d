"""Validation Error

The single failure kind raised by every validator. The path is captured from
the context at raise time, so the message always names the offending field:

    Validation error for key 'subItems.0.value': expected a string, not a number
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ValidationError(Exception):
    """Validation failure with the reason and the path it was raised at."""
    reason: str
    path: tuple[str, ...] = ()

    def __post_init__(self):
        super().__init__(self.message)

    @property
    def dotted_path(self) -> str: return ".".join(self.path)

    @property
    def message(self) -> str:
        if not self.path: return f"Validation error: {self.reason}"
        return f"Validation error for key '{self.dotted_path}': {self.reason}"

    def __str__(self) -> str: return self.message

    def with_prefix(self, *segments: str) -> ValidationError:
        """Re-root the error under ``segments``, e.g. the index of a batch item."""
        return ValidationError(self.reason, (*segments, *self.path))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and API responses."""
        return {"path": self.dotted_path, "message": self.reason}
