"""Structured value extraction.

Rules:
- Reads never fail on their own: a missing key, an index past the end and an
  element stored as ``ABSENT`` all read as ``ABSENT``.
- A :class:`Name` resolves ``ABSENT`` to its default (a fresh copy each time).
  ``None``, ``0``, ``""`` and other falsy values are kept as they are.
- A nested pattern resolves ``ABSENT`` to its own default and then needs a
  mapping (:class:`MapPattern`) or a non-string sequence (:class:`SeqPattern`);
  anything else raises :class:`ShapeMismatch`.
- Rest bindings always build new containers; the source is never mutated.
"""
from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeVar

from .exceptions import ShapeMismatch
from .logging import get_logger
from .patterns import Hole, MapPattern, Name, Pattern, SeqPattern
from .sentinel import ABSENT, resolve_default

logger = get_logger(__name__)

Bindings = dict[str, Any]

R = TypeVar("R")

_STRING_TYPES = (str, bytes, bytearray)


def _type_label(value: Any) -> str:
    if value is ABSENT:
        return "ABSENT"
    return type(value).__name__


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _STRING_TYPES)


def _read_index(source: Sequence, index: int) -> Any:
    if index < len(source):
        return source[index]
    return ABSENT


def _read_key(source: Mapping, key: Any) -> Any:
    if key in source:
        return source[key]
    return ABSENT


def _bind(value: Any, pattern: Pattern, path: str, out: Bindings) -> None:
    if isinstance(pattern, Name):
        if value is ABSENT and pattern.default is not ABSENT:
            logger.debug("extract.default_applied", path=path, binding=pattern.name)
        out[pattern.name] = resolve_default(value, pattern.default)
        return

    if value is ABSENT and pattern.default is not ABSENT:
        logger.debug("extract.default_applied", path=path, pattern=pattern.kind)
    value = resolve_default(value, pattern.default)

    if isinstance(pattern, SeqPattern):
        _bind_sequence(value, pattern, path, out)
    elif isinstance(pattern, MapPattern):
        _bind_mapping(value, pattern, path, out)
    else:
        raise TypeError(f"Unsupported pattern node: {type(pattern).__name__}")


def _bind_sequence(value: Any, pattern: SeqPattern, path: str, out: Bindings) -> None:
    if not _is_sequence(value):
        logger.debug("extract.shape_mismatch", path=path, expected="sequence")
        raise ShapeMismatch(path=path, expected="sequence", actual=_type_label(value))

    for index, element in enumerate(pattern.elements):
        if isinstance(element, Hole):
            continue
        _bind(_read_index(value, index), element, f"{path}[{index}]", out)

    if pattern.rest is not None:
        out[pattern.rest] = [value[i] for i in range(len(pattern.elements), len(value))]


def _bind_mapping(value: Any, pattern: MapPattern, path: str, out: Bindings) -> None:
    if not isinstance(value, Mapping):
        logger.debug("extract.shape_mismatch", path=path, expected="mapping")
        raise ShapeMismatch(path=path, expected="mapping", actual=_type_label(value))

    for entry in pattern.entries:
        child = f"{path}.{entry.key}" if isinstance(entry.key, str) else f"{path}[{entry.key!r}]"
        _bind(_read_key(value, entry.key), entry.resolved_target, child, out)

    if pattern.rest is not None:
        named = {entry.key for entry in pattern.entries}
        out[pattern.rest] = {k: v for k, v in value.items() if k not in named}


def extract(source: Any, pattern: Pattern) -> Bindings:
    """Destructure *source* according to *pattern*.

    Returns a dict of binding name to resolved value, in pattern order.
    A leaf with no default whose value is absent binds ``ABSENT``.

    Raises:
        ShapeMismatch: A nested pattern met a value of the wrong shape, or an
            absent value with no default to fall back to.
    """
    out: Bindings = {}
    _bind(source, pattern, "$", out)
    return out


def extract_argument(pattern: Pattern, arg: Any = ABSENT) -> Bindings:
    """Function-parameter form: destructure a single, possibly omitted, argument.

    ``extract_argument(obj(..., default={}))`` applies the whole-argument
    default first, then the nested defaults.
    """
    return extract(arg, pattern)


def destructured(pattern: Pattern) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Decorate a function whose only parameter is destructured by *pattern*.

    The wrapped function receives the bindings as keyword arguments and may be
    called with one positional argument or none at all.
    """

    def decorator(func: Callable[..., R]) -> Callable[..., R]:
        @functools.wraps(func)
        def wrapper(arg: Any = ABSENT) -> R:
            return func(**extract_argument(pattern, arg))

        return wrapper

    return decorator


def extract_each(records: Iterable[Any], pattern: Pattern) -> Iterator[Bindings]:
    """Lazily destructure each record in order."""
    for record in records:
        yield extract(record, pattern)
