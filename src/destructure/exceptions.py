from __future__ import annotations

from dataclasses import dataclass


class DestructureError(Exception):
    """Base exception for all destructuring failures."""


@dataclass
class ShapeMismatch(DestructureError):
    """Raised when a pattern needs a mapping or sequence and finds something else.

    Scenarios:
    - a nested pattern meets a scalar (``{"author": "John"}`` against
      ``{author: {name}}``)
    - a nested pattern meets the absent sentinel and supplies no default

    Missing keys and short sequences are never errors on their own; they
    resolve through default substitution.
    """

    path: str
    expected: str
    actual: str

    def __post_init__(self) -> None:
        # args mirror the fields
        super().__init__(self.path, self.expected, self.actual)

    def __str__(self) -> str:
        return f"Cannot destructure {self.actual} at {self.path}: expected {self.expected}"
