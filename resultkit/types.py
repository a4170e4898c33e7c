"""Result type algebra.

This module defines the two variants of the Result sum type and the generic
aliases that keep code written against it fully typed. A Result is either a
``Success`` carrying a value or a ``Failure`` carrying an error, discriminated
by the boolean ``ok`` tag.

Python has no conditional types, so the type-level operators are expressed as
generic aliases and overloads, and case narrowing is backed by runtime checks
that type checkers understand through ``TypeGuard``.

Usage:
    def parse_port(text: str) -> Result[int, str]:
        if not text.isdigit():
            return Failure(f"not a number: {text!r}")
        return Success(int(text))

    match parse_port("8080"):
        case Success(port):
            print(f"Listening on {port}")
        case Failure(error):
            print(f"Bad port: {error}")
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, TypeGuard, TypeVar, Union

from resultkit.exceptions import NarrowingError

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Success payload type
E = TypeVar("E")  # Failure payload type
U = TypeVar("U")  # Fallback type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value.

    ``Success[Never]`` is uninhabited: no value can be passed for ``value``,
    so a type checker rejects any attempt to build one.

    Attributes:
        value: The successful result value.
    """

    ok: ClassVar[Literal[True]] = True

    value: T

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error.

    Attributes:
        error: The error payload. Any type, not only exceptions.
    """

    ok: ClassVar[Literal[False]] = False

    error: E

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for the Result union
Result = Union[Success[T], Failure[E]]
Either = Result

# Whichever payload is present: the value of a Success or the error of a Failure
Inspect = Union[T, E]

# Result[T, E] with roles swapped, i.e. Result[E, T]
Invert = Union[Failure[T], Success[E]]

# Success payload, or the fallback type when the input may be a Failure
Unwrap = Union[T, U]

UnwrapCallback = Callable[[E], U]


def variant_name(obj: object) -> str:
    """Name of the variant ``obj`` belongs to, or its type name otherwise."""
    if isinstance(obj, Success):
        return "Success"
    if isinstance(obj, Failure):
        return "Failure"
    return type(obj).__name__


def is_success(result: Result[T, E]) -> TypeGuard[Success[T]]:
    """Return True if ``result`` is a Success. Any other object yields False."""
    return isinstance(result, Success)


def is_failure(result: Result[T, E]) -> TypeGuard[Failure[E]]:
    """Return True if ``result`` is a Failure. Any other object yields False."""
    return isinstance(result, Failure)


class Case:
    """Narrow a Result down to one of its variants.

    Narrowing to a variant the value is not a member of has no result, so it
    raises ``NarrowingError`` instead of returning.
    """

    @staticmethod
    def success(result: Result[T, E]) -> Success[T]:
        """Return ``result`` as a Success.

        Raises:
            NarrowingError: If ``result`` is not a Success
        """
        if isinstance(result, Success):
            return result
        raise narrowing_error("Success", result)

    @staticmethod
    def failure(result: Result[T, E]) -> Failure[E]:
        """Return ``result`` as a Failure.

        Raises:
            NarrowingError: If ``result`` is not a Failure
        """
        if isinstance(result, Failure):
            return result
        raise narrowing_error("Failure", result)


def narrowing_error(expected: str, obj: Any) -> NarrowingError:
    """Build the error for a value that is not a member of ``expected``."""
    actual = variant_name(obj)
    logger.debug(f"Cannot narrow {actual} to {expected}")
    return NarrowingError(f"Expected {expected}, got {actual}", expected=expected, actual=actual)
