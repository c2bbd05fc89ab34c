"""Utility functions and helpers."""

from .logging import setup_logging, default_log_dir

__all__ = [
    "setup_logging",
    "default_log_dir",
]
