"""
Conversions between monado containers and the `returns` library.

File and JSON handling use `returns` containers (see `utils.load_json`),
while the rest of the package speaks `monado.monad`. These helpers are the
only place where the two meet.
"""

from typing import Any

from returns import maybe as returns_maybe
from returns import result as returns_result

from .monad.maybe import NOTHING, Just, Maybe, Nothing
from .monad.result import Err, Ok, Result


def to_returns[T, E](result: Result[T, E]) -> returns_result.Result[T, E]:
    match result:
        case Ok(value):
            return returns_result.Success(value)
        case Err(error):
            return returns_result.Failure(error)


def from_returns(container: Any) -> Result[Any, Any]:
    """Converts a `returns` Success/Failure into `Ok`/`Err`."""
    if isinstance(container, returns_result.Success):
        return Ok(container.unwrap())
    if isinstance(container, returns_result.Failure):
        return Err(container.failure())
    raise TypeError(f"Expected a returns Result, got {type(container).__name__}")


def maybe_to_returns[T](maybe: Maybe[T]) -> returns_maybe.Maybe[T]:
    match maybe:
        case Just(value):
            return returns_maybe.Some(value)
        case Nothing():
            return returns_maybe.Nothing


def maybe_from_returns(container: Any) -> Maybe[Any]:
    """Converts a `returns` Some/Nothing into `Just`/`Nothing`."""
    if container is returns_maybe.Nothing:
        return NOTHING
    if isinstance(container, returns_maybe.Some):
        return Just(container.unwrap())
    raise TypeError(f"Expected a returns Maybe, got {type(container).__name__}")


__all__ = ["from_returns", "maybe_from_returns", "maybe_to_returns", "to_returns"]
