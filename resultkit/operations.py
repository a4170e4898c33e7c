"""Constructors and accessors for Result values.

Every function here is pure: it reads its arguments, builds a fresh immutable
variant when needed, and touches no shared state. None of them raise for a
well-formed Result. Passing anything else is a contract violation reported as
``NarrowingError``.
"""

import logging
from typing import Any, Literal, overload

from resultkit.exceptions import UnwrapError
from resultkit.types import (
    E,
    Failure,
    Inspect,
    Invert,
    Result,
    Success,
    T,
    U,
    Unwrap,
    UnwrapCallback,
    narrowing_error,
)

logger = logging.getLogger(__name__)


@overload
def success() -> Success[None]: ...
@overload
def success(value: T) -> Success[T]: ...
def success(value: Any = None) -> Success[Any]:
    """Build a Success. The payload defaults to None."""
    return Success(value)


@overload
def failure() -> Failure[None]: ...
@overload
def failure(error: E) -> Failure[E]: ...
def failure(error: Any = None) -> Failure[Any]:
    """Build a Failure. The payload defaults to None."""
    return Failure(error)


@overload
def from_(test: Literal[True]) -> Success[None]: ...
@overload
def from_(test: Literal[False]) -> Failure[None]: ...
@overload
def from_(test: bool) -> Result[None, None]: ...
@overload
def from_(test: Literal[True], data: U) -> Success[U]: ...
@overload
def from_(test: Literal[False], data: U) -> Failure[U]: ...
@overload
def from_(test: bool, data: U) -> Result[U, U]: ...
def from_(test: bool, data: Any = None) -> Result[Any, Any]:
    """
    Build a Success or a Failure from a boolean test.

    The variant is picked by the truthiness of ``test`` and both variants carry
    the same ``data``. Type checkers resolve a single variant only when ``test``
    is a ``Literal[True]`` or ``Literal[False]``; a plain ``bool`` gives the
    union of both.

    Args:
        test: Selects Success when truthy, Failure otherwise
        data: Payload for either variant (default: None, same as
            ``success()`` and ``failure()``)

    Returns:
        ``success(data)`` if ``test`` else ``failure(data)``

    Example:
        >>> from_(True, "ready")
        Success('ready')
        >>> from_(False)
        Failure(None)
    """
    return success(data) if test else failure(data)


def inspect(result: Result[T, E]) -> Inspect[T, E]:
    """Return whichever payload is present: the value or the error."""
    match result:
        case Success(value):
            return value
        case Failure(error):
            return error
        case _:
            raise narrowing_error("Result", result)


def invert(result: Result[T, E]) -> Invert[T, E]:
    """Swap the roles of a Result, keeping its payload.

    A Success becomes a Failure carrying the same value and vice versa, so
    ``invert(invert(r)) == r`` for every Result ``r``.
    """
    match result:
        case Success(value):
            return failure(value)
        case Failure(error):
            return success(error)
        case _:
            raise narrowing_error("Result", result)


@overload
def unwrap(result: Success[T], callback: UnwrapCallback[Any, Any] | None = None) -> T: ...
@overload
def unwrap(result: Result[T, E], callback: UnwrapCallback[E, U]) -> Unwrap[T, U]: ...
def unwrap(result: Result[Any, Any], callback: UnwrapCallback[Any, Any] | None = None) -> Any:
    """
    Extract the value of a Success, or fall back through ``callback``.

    The callback runs only for a Failure, exactly once, with the error payload.
    Whatever it raises propagates to the caller. Type checkers only allow the
    callback to be omitted when ``result`` is statically a Success.

    Args:
        result: Result to unwrap
        callback: Maps the error payload to a fallback value

    Returns:
        The Success value, or ``callback(error)`` for a Failure

    Raises:
        UnwrapError: If ``result`` is a Failure and no callback was given
        NarrowingError: If ``result`` is not a Result

    Example:
        >>> unwrap(success(42))
        42
        >>> unwrap(failure("x"), len)
        1
    """
    match result:
        case Success(value):
            return value
        case Failure(error):
            if callback is None:
                logger.debug(f"unwrap called on Failure without a fallback: {error!r}")
                exc = UnwrapError(
                    f"Called unwrap on a Failure without a fallback callback: {error!r}",
                    error=error,
                )
                if isinstance(error, BaseException):
                    raise exc from error
                raise exc
            logger.debug(f"Unwrapping Failure through fallback {callback!r}")
            return callback(error)
        case _:
            raise narrowing_error("Result", result)
