"""
resultkit: a tagged-union Result type.

A Result is either a Success carrying a value or a Failure carrying an error.
Fallible code returns one instead of raising, and callers inspect, invert or
unwrap it as an ordinary value.
"""

import logging

from resultkit.exceptions import MalformedResultError, NarrowingError, ResultError, UnwrapError
from resultkit.operations import failure, from_, inspect, invert, success, unwrap
from resultkit.records import from_record, to_record
from resultkit.types import (
    Case,
    Either,
    Failure,
    Inspect,
    Invert,
    Result,
    Success,
    Unwrap,
    UnwrapCallback,
    is_failure,
    is_success,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Success",
    "Failure",
    "Result",
    "Either",
    "Case",
    "Inspect",
    "Invert",
    "Unwrap",
    "UnwrapCallback",
    "is_success",
    "is_failure",
    "success",
    "failure",
    "from_",
    "inspect",
    "invert",
    "unwrap",
    "to_record",
    "from_record",
    "ResultError",
    "NarrowingError",
    "UnwrapError",
    "MalformedResultError",
]
