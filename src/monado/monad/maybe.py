"""
Defines the `Maybe` Algebraic Data Type for values that may be absent.

`Maybe` is a sum type with exactly two variants: `Just`, which holds a value,
and `Nothing`, which holds none. Pipelines built from `bind`, `map` and `filter`
short-circuit on `Nothing`, so the caller never has to write a `None` check
between steps.

The three monad laws hold for every `Maybe` built through `wrap` or `nothing`:

1. Left identity: ``bind(wrap(a), f) == f(a)`` for any non-None ``a``.
2. Right identity: ``bind(m, wrap) == m``.
3. Associativity: ``bind(bind(m, f), g) == bind(m, lambda x: bind(f(x), g))``.

Note on `wrap`: it maps ``None`` to `Nothing` and everything else, including
falsy values such as ``0`` and ``""``, to `Just`. This null coercion is a
deliberate rule that the examples and demos rely on; it is not a monad law.
Do not change `wrap` to require explicit wrapping.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Final


@dataclass(frozen=True, slots=True)
class Just[T]:
    """Represents a present value."""

    value: T


@dataclass(frozen=True, slots=True)
class Nothing:
    """Represents the absence of a value."""


type Maybe[T] = Just[T] | Nothing

NOTHING: Final[Nothing] = Nothing()


def wrap[T](value: T | None) -> Maybe[T]:
    """Lifts a value into `Maybe`, treating ``None`` as `Nothing`."""
    if value is None:
        return NOTHING
    return Just(value)


def just[T](value: T) -> Maybe[T]:
    """Creates a `Just` directly, without the ``None`` check of `wrap`."""
    return Just(value)


def nothing() -> Maybe[object]:
    return NOTHING


def bind[T, U](maybe: Maybe[T], func: Callable[[T], Maybe[U]]) -> Maybe[U]:
    """
    Applies `func` to the value inside `maybe`.

    `func` is not called when `maybe` is `Nothing`. Since `func` returns a
    `Maybe` itself, it may return `Nothing` to stop the rest of a pipeline.
    """
    match maybe:
        case Just(value):
            return func(value)
        case Nothing():
            return NOTHING


then_bind = bind


def map[T, U](maybe: Maybe[T], func: Callable[[T], U]) -> Maybe[U]:
    """
    Applies a plain function to the value inside `maybe`.

    Exceptions raised by `func` propagate to the caller unchanged.
    """
    match maybe:
        case Just(value):
            return Just(func(value))
        case Nothing():
            return NOTHING


def filter[T](maybe: Maybe[T], predicate: Callable[[T], bool]) -> Maybe[T]:
    """Keeps the value only if `predicate` accepts it."""
    match maybe:
        case Just(value) if predicate(value):
            return maybe
        case _:
            return NOTHING


def unwrap_or[T, U](maybe: Maybe[T], default: U) -> T | U:
    """Extracts the value, falling back to `default` for `Nothing`."""
    match maybe:
        case Just(value):
            return value
        case Nothing():
            return default


from_maybe = unwrap_or


def is_just(maybe: Maybe[object]) -> bool:
    return isinstance(maybe, Just)


def is_nothing(maybe: Maybe[object]) -> bool:
    return isinstance(maybe, Nothing)


def chain[T](maybe: Maybe[T], functions: Iterable[Callable[[T], Maybe[T]]]) -> Maybe[T]:
    """
    Binds each function in order, stopping at the first `Nothing`.

    Functions after the one that produced `Nothing` are never called.
    """
    return reduce(bind, functions, maybe)


__all__ = [
    "NOTHING",
    "Just",
    "Maybe",
    "Nothing",
    "bind",
    "chain",
    "filter",
    "from_maybe",
    "is_just",
    "is_nothing",
    "just",
    "map",
    "nothing",
    "then_bind",
    "unwrap_or",
    "wrap",
]
