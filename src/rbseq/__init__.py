"""Ruby-inspired helpers for Python iterables."""

from .sequences import (
    NOT_FOUND,
    reject,
    chunk,
    assoc_first_or_default,
    compact,
    cycle,
    for_each,
    for_each_with_index,
    distinct,
)
from .chain import Chain
from .exceptions import (
    RbseqError,
    ConfigurationError,
    InvalidArgumentError,
    NullCallbackError,
    SinglePassSourceError,
)

__version__ = "0.1.0"

__all__ = [
    "NOT_FOUND",
    "reject",
    "chunk",
    "assoc_first_or_default",
    "compact",
    "cycle",
    "for_each",
    "for_each_with_index",
    "distinct",
    "Chain",
    "RbseqError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NullCallbackError",
    "SinglePassSourceError",
]
