"""Argument validation exceptions."""

from typing import Optional, Any
from .base import RbseqError


class InvalidArgumentError(RbseqError, ValueError):
    """Raised when a parameter violates a stated precondition."""

    def __init__(
        self,
        parameter_name: str,
        parameter_value: Any,
        *,
        expected: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs
    ):
        if message is None:
            message = f"Invalid parameter '{parameter_name}': {parameter_value!r}"
            if expected:
                message = f"{message} (expected {expected})"
        super().__init__(message, **kwargs)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value
        self.add_context('parameter_name', parameter_name)
        self.add_context('parameter_value', repr(parameter_value))
        if expected:
            self.add_context('expected', expected)

    def _get_default_error_code(self) -> str:
        return "INVALID_ARGUMENT"


class NullCallbackError(InvalidArgumentError, TypeError):
    """Raised when a required callback is missing or not callable."""

    def __init__(self, parameter_name: str, parameter_value: Any = None, **kwargs):
        if parameter_value is None:
            message = f"Callback '{parameter_name}' is required but was None"
        else:
            message = (
                f"Callback '{parameter_name}' must be callable, "
                f"got {type(parameter_value).__name__}"
            )
        super().__init__(
            parameter_name, parameter_value, expected="a callable", message=message, **kwargs
        )
        self.add_suggestion(f"Pass a function or lambda as '{parameter_name}'")

    def _get_default_error_code(self) -> str:
        return "NULL_CALLBACK"


class SinglePassSourceError(InvalidArgumentError):
    """Raised when an operation needs to re-iterate a one-shot iterator."""

    def __init__(self, parameter_value: Any, *, passes: Optional[int] = None, **kwargs):
        wanted = "an unbounded number of" if passes is None else str(passes)
        message = (
            f"Source {type(parameter_value).__name__} is a single-pass iterator "
            f"but {wanted} passes were requested"
        )
        super().__init__(
            "source", parameter_value, expected="a re-iterable collection",
            message=message, **kwargs
        )
        if passes is not None:
            self.add_context('passes', passes)
        self.add_suggestion("Materialise the source first, e.g. with list(source)")

    def _get_default_error_code(self) -> str:
        return "SINGLE_PASS_SOURCE"
