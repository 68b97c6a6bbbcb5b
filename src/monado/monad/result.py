"""
Defines the `Result` Algebraic Data Type for computations that may fail.

`Result` is a sum type representing either a success (`Ok`) or a failure
(`Err`). The error payload is whatever the caller passes in, usually a
human-readable message; this module never inspects it. Failures are returned
as values and travel through `bind` and `chain` untouched, so a pipeline stops
at the first `Err` without any try/except.

Exceptions raised by callbacks handed to `bind`, `map` or `map_error` are not
caught here; they reach the caller as-is.

The three monad laws hold with `ok` as the unit:

1. Left identity: ``bind(ok(a), f) == f(a)``.
2. Right identity: ``bind(r, ok) == r``.
3. Associativity: ``bind(bind(r, f), g) == bind(r, lambda x: bind(f(x), g))``.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce

from .maybe import Just, Maybe, Nothing


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful outcome containing a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failure outcome containing an error."""

    error: E


# The Result type is a union of Ok and Err, representing either success or failure.
type Result[T, E] = Ok[T] | Err[E]


def ok[T](value: T) -> Result[T, object]:
    return Ok(value)


def err[E](error: E) -> Result[object, E]:
    return Err(error)


success = ok
failure = err


def bind[T, U, E](result: Result[T, E], func: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """
    Applies `func` to the success value.

    An `Err` is returned as the very same object and `func` is not called.
    """
    match result:
        case Ok(value):
            return func(value)
        case Err():
            return result


then_bind = bind


def map[T, U, E](result: Result[T, E], func: Callable[[T], U]) -> Result[U, E]:
    """Transforms the success value, leaving an `Err` untouched."""
    match result:
        case Ok(value):
            return Ok(func(value))
        case Err():
            return result


def map_error[T, E, F](result: Result[T, E], func: Callable[[E], F]) -> Result[T, F]:
    """Transforms the error value, leaving an `Ok` untouched."""
    match result:
        case Ok():
            return result
        case Err(error):
            return Err(func(error))


def unwrap_or[T, U](result: Result[T, object], default: U) -> T | U:
    match result:
        case Ok(value):
            return value
        case Err():
            return default


from_result = unwrap_or


def is_ok(result: Result[object, object]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Result[object, object]) -> bool:
    return isinstance(result, Err)


def from_maybe[T, E](maybe: Maybe[T], error_if_absent: E) -> Result[T, E]:
    """Converts `Just(v)` into `Ok(v)` and `Nothing` into `Err(error_if_absent)`."""
    match maybe:
        case Just(value):
            return Ok(value)
        case Nothing():
            return Err(error_if_absent)


def chain[T, E](result: Result[T, E], functions: Iterable[Callable[[T], Result[T, E]]]) -> Result[T, E]:
    """Binds each function in order, stopping at the first `Err`."""
    return reduce(bind, functions, result)


__all__ = [
    "Err",
    "Ok",
    "Result",
    "bind",
    "chain",
    "err",
    "failure",
    "from_maybe",
    "from_result",
    "is_err",
    "is_ok",
    "map",
    "map_error",
    "ok",
    "success",
    "then_bind",
    "unwrap_or",
]
