import logging
from pathlib import Path

from returns.result import Result as ReturnsResult

from ..app import config
from ..interop import from_returns
from ..monad import result
from ..monad.result import Result
from ..utils import load_json
from ._internal.collectors import collect_with_context
from ._internal.parsers import (
    DictParser,
    OptionalParser,
    Parser,
    snippet_parser,
    string_list_parser,
    string_parser,
)
from .models import Catalog, CodeExample, Comparison

logger = logging.getLogger(__name__)


def _create_code_example_parser() -> DictParser[CodeExample]:
    return DictParser(
        field_parsers={
            "title": string_parser(),
            "location": string_parser(),
            "problem": string_parser(),
            "without_monad": OptionalParser(snippet_parser(), None),
            "with_monad": snippet_parser(),
            "benefits": OptionalParser(string_list_parser(), []),
        },
        constructor=CodeExample,
    )


def _create_comparison_parser() -> DictParser[Comparison]:
    return DictParser(
        field_parsers={
            "scenario": string_parser(),
            "without_monads": snippet_parser(),
            "with_monads": snippet_parser(),
            "improvements": OptionalParser(string_list_parser(), []),
        },
        constructor=Comparison,
    )


class _SectionParser[T]:
    """Parses a list of catalog entries, naming the section in error messages."""

    def __init__(self, item_parser: Parser[T], error_context: str):
        self.item_parser = item_parser
        self.error_context = error_context

    def parse(self, raw_data: object) -> ReturnsResult[tuple[T, ...], str]:
        return collect_with_context(raw_data, self.item_parser, self.error_context)


def _create_catalog_parser() -> DictParser[Catalog]:
    example_parser = _create_code_example_parser()
    return DictParser(
        field_parsers={
            "maybe": _SectionParser(example_parser, "maybe example"),
            "result": _SectionParser(example_parser, "result example"),
            "comparison": _create_comparison_parser(),
        },
        constructor=Catalog,
    )


def get_catalog(path: Path = config.EXAMPLES_FILE) -> Result[Catalog, str]:
    """Load and validate the example catalog."""
    catalog_parser = _create_catalog_parser()
    loaded = load_json(path).bind(catalog_parser.parse)
    outcome = from_returns(loaded)
    if result.is_err(outcome):
        logger.warning("Could not load example catalog from %s", path)
    else:
        logger.debug("Loaded example catalog from %s", path)
    return outcome


def maybe_real_world_examples() -> Result[tuple[CodeExample, ...], str]:
    """Examples of the Maybe monad taken from the demo pipelines."""
    return result.map(get_catalog(), lambda catalog: catalog.maybe)


def result_real_world_examples() -> Result[tuple[CodeExample, ...], str]:
    """Examples of the Result monad taken from the demo pipelines."""
    return result.map(get_catalog(), lambda catalog: catalog.result)


def before_after_comparison() -> Result[Comparison, str]:
    return result.map(get_catalog(), lambda catalog: catalog.comparison)


__all__ = [
    "before_after_comparison",
    "get_catalog",
    "maybe_real_world_examples",
    "result_real_world_examples",
]
