"""The absent sentinel and default resolution.

``ABSENT`` marks a value that is not set: a key missing from a mapping, an
index past the end of a sequence, or an element explicitly stored as
``ABSENT``. It is distinct from ``None`` and every other falsy value; only
``ABSENT`` triggers default substitution.
"""
from __future__ import annotations

import copy
from typing import Any


class _Absent:
    """Singleton type of :data:`ABSENT`."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict) -> _Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Any = _Absent()


def is_absent(value: Any) -> bool:
    """Return True only for the absent sentinel (never for None, 0, '' etc.)."""
    return value is ABSENT


def resolve_default(value: Any, default: Any = ABSENT) -> Any:
    """Return *value*, or a fresh copy of *default* when *value* is absent."""
    if value is not ABSENT:
        return value
    return copy.deepcopy(default)
