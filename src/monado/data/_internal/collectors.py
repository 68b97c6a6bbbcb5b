from typing import Any

from returns.result import Failure, Result, Success

from monado.data._internal.parsers import Parser, parse


def collect_with_context[T](
    raw_items: Any, item_parser: Parser[T], error_context: str = "item"
) -> Result[tuple[T, ...], str]:
    """Collect with enhanced error context, e.g. ``Error parsing maybe example 2: ...``."""
    if not isinstance(raw_items, list):
        return Failure(f"Expected a list of {error_context}s, got {type(raw_items).__name__}")

    parsed_items = []
    for i, raw_item in enumerate(raw_items):
        result = parse(raw_item, item_parser)
        if isinstance(result, Failure):
            return Failure(f"Error parsing {error_context} {i}: {result.failure()}")
        parsed_items.append(result.unwrap())

    return Success(tuple(parsed_items))


__all__ = ["collect_with_context"]
