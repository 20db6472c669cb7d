"""destructure - pull named values out of nested data with fallback defaults.

A pattern describes which positions or keys of a sequence or mapping to bind,
which nested values to descend into, and which defaults to use when a value
is absent. Only the :data:`ABSENT` sentinel triggers a default.
"""

from .exceptions import DestructureError, ShapeMismatch
from .extractor import Bindings, destructured, extract, extract_argument, extract_each
from .logging import configure_logging, get_logger
from .patterns import (
    Entry,
    Hole,
    MapPattern,
    Name,
    Pattern,
    SeqPattern,
    hole,
    key,
    name,
    obj,
    seq,
)
from .sentinel import ABSENT, is_absent, resolve_default

__version__ = "0.1.0"

__all__ = [
    # Extraction
    "Bindings",
    "extract",
    "extract_argument",
    "extract_each",
    "destructured",
    # Patterns
    "Pattern",
    "Name",
    "Hole",
    "Entry",
    "SeqPattern",
    "MapPattern",
    "name",
    "hole",
    "key",
    "obj",
    "seq",
    # Sentinel
    "ABSENT",
    "is_absent",
    "resolve_default",
    # Errors
    "DestructureError",
    "ShapeMismatch",
    # Logging
    "configure_logging",
    "get_logger",
]
