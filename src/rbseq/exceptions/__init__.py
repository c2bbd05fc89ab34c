"""Custom exceptions for the rbseq package."""

# Base exceptions
from .base import (
    RbseqError,
    ConfigurationError,
)

# Argument exceptions
from .arguments import (
    InvalidArgumentError,
    NullCallbackError,
    SinglePassSourceError,
)

__all__ = [
    # Base
    "RbseqError",
    "ConfigurationError",

    # Arguments
    "InvalidArgumentError",
    "NullCallbackError",
    "SinglePassSourceError",
]
