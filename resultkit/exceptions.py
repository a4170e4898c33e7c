"""Library-level exceptions.

The value layer never raises for well-formed input. These exceptions signal
contract violations: narrowing to the wrong variant, unwrapping a Failure
without a fallback, or decoding a record that does not have the Result shape.
"""

from typing import Any


class ResultError(Exception):
    """Base exception for all resultkit errors."""
    pass


class NarrowingError(ResultError):
    """Raised when a value is not a member of the requested variant."""

    def __init__(self, message: str, expected: str, actual: str):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class UnwrapError(ResultError):
    """Raised when a Failure is unwrapped without a fallback callback."""

    def __init__(self, message: str, error: Any):
        super().__init__(message)
        self.error = error


class MalformedResultError(ResultError):
    """Raised when a record does not match the two-field Result shape."""

    def __init__(self, message: str, record: Any):
        super().__init__(message)
        self.record = record
