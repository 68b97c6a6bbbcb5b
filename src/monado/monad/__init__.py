"""
Maybe and Result combinators.

Both modules expose plain functions rather than methods, so they are
imported as namespaces::

    from monado.monad import maybe, result

    maybe.chain(maybe.wrap(5), [...])
"""

from . import maybe, result
from .maybe import Just, Maybe, Nothing
from .result import Err, Ok, Result

__all__ = ["Err", "Just", "Maybe", "Nothing", "Ok", "Result", "maybe", "result"]
