"""Record shape of a Result.

A Result crosses process or API boundaries as a mapping with exactly two keys:
the boolean ``ok`` tag and one payload key whose name depends on the tag::

    {"ok": True, "value": 42}
    {"ok": False, "error": "not found"}

A record never carries both ``value`` and ``error``. Payloads are passed
through untouched; encoding them is up to the caller.
"""

import logging
from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from resultkit.config import get_settings
from resultkit.exceptions import MalformedResultError
from resultkit.types import E, Failure, Result, Success, T, narrowing_error

logger = logging.getLogger(__name__)


def _require_bool(value: Any) -> Any:
    # 1 == True, so Literal[True] alone would accept ints and floats
    if type(value) is not bool:
        raise ValueError(f"ok must be a bool, got {type(value).__name__}")
    return value


class SuccessRecord(BaseModel):
    """Validated ``{"ok": True, "value": ...}`` record."""

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    ok: Literal[True]
    value: Any

    @field_validator("ok", mode="before")
    @classmethod
    def ok_is_bool(cls, value: Any) -> Any:
        return _require_bool(value)


class FailureRecord(BaseModel):
    """Validated ``{"ok": False, "error": ...}`` record."""

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    ok: Literal[False]
    error: Any

    @field_validator("ok", mode="before")
    @classmethod
    def ok_is_bool(cls, value: Any) -> Any:
        return _require_bool(value)


class _LenientSuccessRecord(SuccessRecord):
    model_config = ConfigDict(extra="ignore")


class _LenientFailureRecord(FailureRecord):
    model_config = ConfigDict(extra="ignore")


_STRICT_ADAPTER: TypeAdapter[SuccessRecord | FailureRecord] = TypeAdapter(
    Union[SuccessRecord, FailureRecord]
)
_LENIENT_ADAPTER: TypeAdapter[SuccessRecord | FailureRecord] = TypeAdapter(
    Union[_LenientSuccessRecord, _LenientFailureRecord]
)


def to_record(result: Result[T, E]) -> dict[str, Any]:
    """Return the two-key record for ``result``.

    Raises:
        NarrowingError: If ``result`` is not a Result
    """
    match result:
        case Success(value):
            return {"ok": True, "value": value}
        case Failure(error):
            return {"ok": False, "error": error}
        case _:
            raise narrowing_error("Result", result)


def from_record(record: Mapping[str, Any]) -> Result[Any, Any]:
    """
    Build a Success or a Failure from its record.

    The ``ok`` tag must be a real ``bool`` and the payload key must match it.
    Unknown keys are rejected unless ``Settings.record_extra`` is ``"ignore"``.
    A record carrying both ``value`` and ``error`` is always rejected.

    Args:
        record: Mapping in the Result record shape

    Returns:
        ``Success(record["value"])`` or ``Failure(record["error"])``

    Raises:
        MalformedResultError: If ``record`` does not have the Result shape
    """
    if not isinstance(record, Mapping):
        raise _malformed(f"Expected a mapping, got {type(record).__name__}", record)

    if "value" in record and "error" in record:
        raise _malformed("Record carries both 'value' and 'error'", record)

    adapter = _LENIENT_ADAPTER if get_settings().record_extra == "ignore" else _STRICT_ADAPTER

    try:
        validated = adapter.validate_python(dict(record))
    except ValidationError as e:
        raise _malformed(f"Record does not match the Result shape: {e}", record) from e

    if isinstance(validated, SuccessRecord):
        return Success(validated.value)
    return Failure(validated.error)


def _malformed(message: str, record: Any) -> MalformedResultError:
    logger.debug(message)
    return MalformedResultError(message, record=record)
