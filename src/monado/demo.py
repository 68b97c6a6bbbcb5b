"""
Interactive demo pipelines built on the Maybe and Result combinators.

Every function here takes raw user input (strings, possibly missing) and
returns a value. `Nothing` and `Err` are turned into a fallback or into an
error outcome with a message; nothing in this module raises on bad input.
"""

import logging
import math
import re
from collections.abc import Callable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from .app import config
from .monad import maybe, result
from .monad.maybe import NOTHING, Just, Maybe, Nothing
from .monad.result import Err, Ok, Result

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_TWO_NUMBERS_HINT = "Please provide two numbers separated by comma (e.g., '10, 2')"


class DemoOutcome(BaseModel):
    """What a demo run produced, plus the steps it went through."""
    model_config = ConfigDict(frozen=True)

    type: Literal["success", "error"]
    message: str
    steps: tuple[str, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.type == "success"


# --- Language selection ---


def select_language(lang: str | None) -> str:
    """Picks a supported language, falling back to the default."""
    lowered = maybe.map(maybe.wrap(lang), str.lower)
    supported = maybe.filter(lowered, config.SUPPORTED_LANGUAGES.__contains__)
    return maybe.unwrap_or(supported, config.DEFAULT_LANGUAGE)


def _validate_params(params: Any) -> Result[Mapping[str, Any], str]:
    if isinstance(params, Mapping):
        return Ok(params)
    return Err("Invalid parameters")


def _get_language(params: Mapping[str, Any]) -> Result[str, str]:
    match params.get("lang"):
        case None:
            return Err("Language not specified")
        case "":
            return Err("Language cannot be empty")
        case str() as lang:
            return Ok(lang)
        case other:
            return Err(f"Language must be a string, got {type(other).__name__}")


def select_language_strict(params: Any) -> Result[str, str]:
    """Like `select_language`, but reports why a language could not be read."""
    return result.map(result.bind(_validate_params(params), _get_language), str.lower)


def resolve_language(params: Any) -> str:
    outcome = select_language_strict(params)
    if isinstance(outcome, Err):
        logger.debug("Falling back to %s: %s", config.DEFAULT_LANGUAGE, outcome.error)
    return result.unwrap_or(outcome, config.DEFAULT_LANGUAGE)


# --- Parsing and validation helpers ---


def parse_integer(text: str) -> Maybe[int]:
    """Parses a whole string as a base-10 integer; trailing garbage gives `Nothing`."""
    if not _INTEGER_PATTERN.fullmatch(text):
        return NOTHING
    try:
        return Just(int(text))
    except ValueError:
        # beyond the interpreter's integer string conversion limit
        return NOTHING


def _parse_float(text: str) -> Result[float, str]:
    """Parses a plain finite decimal; `inf`, `nan` and `1_000` are rejected."""
    stripped = text.strip()
    if _FLOAT_PATTERN.fullmatch(stripped):
        value = float(stripped)
        if math.isfinite(value):
            return Ok(value)
    return Err(f"Invalid number: {text}")


def parse_numbers(text: str) -> Result[tuple[float, float], str]:
    parts = text.split(",")
    if len(parts) != 2:
        return Err(_TWO_NUMBERS_HINT)
    first, second = parts
    return result.bind(
        _parse_float(first),
        lambda a: result.map(_parse_float(second), lambda b: (a, b)),
    )


def safe_divide(a: float, b: float) -> Result[float, str]:
    if b == 0:
        return Err("Cannot divide by zero")
    return Ok(a / b)


def validate_positive(n: int) -> Maybe[int]:
    return Just(n) if n > 0 else NOTHING


def validate_less_than_100(n: int) -> Maybe[int]:
    return Just(n) if n < config.CHAIN_UPPER_BOUND else NOTHING


# --- Demo operations ---


def safe_divide_demo(text: str) -> DemoOutcome:
    outcome = result.bind(parse_numbers(text), lambda pair: safe_divide(*pair))
    match outcome:
        case Ok(value):
            return DemoOutcome(
                type="success",
                message=f"Result: {value}",
                steps=(
                    f"Parsed input: {text}",
                    "Performed division",
                    "Returned result wrapped in Result monad",
                ),
            )
        case Err(reason):
            return DemoOutcome(
                type="error",
                message=reason,
                steps=(
                    f"Parsed input: {text}",
                    f"Error occurred: {reason}",
                    "Returned error wrapped in Result monad",
                ),
            )


def parse_number_demo(text: str) -> DemoOutcome:
    doubled = maybe.map(parse_integer(text.strip()), lambda n: n * 2)
    match doubled:
        case Just(value):
            return DemoOutcome(
                type="success",
                message=f"Parsed and doubled: {value}",
                steps=(
                    f"Input: '{text}'",
                    "Parsed to integer using Maybe monad",
                    "Doubled the value using maybe.map",
                    f"Result: Just({value})",
                ),
            )
        case Nothing():
            return DemoOutcome(
                type="error",
                message=f"Could not parse '{text}' as a number",
                steps=(
                    f"Input: '{text}'",
                    "Failed to parse as integer",
                    "Returned Nothing from Maybe monad",
                ),
            )


def _chain_error_steps(text: str) -> tuple[str, ...]:
    match parse_integer(text.strip()):
        case Nothing():
            return (f"1. Failed to parse '{text}' as integer ✗", "Chain stopped at first Nothing")
        case Just(n) if n <= 0:
            return (f"1. Parsed to {n} ✓", "2. Failed: number is not positive ✗", "Chain stopped")
        case Just(n) if n >= config.CHAIN_UPPER_BOUND:
            return (
                f"1. Parsed to {n} ✓",
                "2. Validated positive ✓",
                f"3. Failed: number >= {config.CHAIN_UPPER_BOUND} ✗",
                "Chain stopped",
            )
        case _:
            return ("Unknown error in chain",)


def chain_demo(text: str) -> DemoOutcome:
    validated = maybe.chain(
        parse_integer(text.strip()), [validate_positive, validate_less_than_100]
    )
    match maybe.map(validated, lambda n: n * 2):
        case Just(value):
            return DemoOutcome(
                type="success",
                message=f"Valid! Result: {value}",
                steps=(
                    f"1. Parsed '{text}' as integer ✓",
                    "2. Validated number is positive ✓",
                    f"3. Validated number is less than {config.CHAIN_UPPER_BOUND} ✓",
                    "4. Doubled the value ✓",
                    f"Final result: Just({value})",
                ),
            )
        case Nothing():
            return DemoOutcome(
                type="error", message="Validation failed", steps=_chain_error_steps(text)
            )


_OPERATIONS: dict[str, Callable[[str], DemoOutcome]] = {
    "safe_divide": safe_divide_demo,
    "parse_number": parse_number_demo,
    "chain": chain_demo,
}


def process_demo_input(text: str | None, operation: str | None) -> DemoOutcome | None:
    """
    Runs the named demo operation on `text`.

    Returns None when either argument is missing or empty, i.e. when there is
    nothing to show yet.
    """
    if not text or not operation:
        return None

    handler = _OPERATIONS.get(operation)
    if handler is None:
        logger.info("Unknown demo operation requested: %s", operation)
        return DemoOutcome(type="error", message="Unknown operation")

    outcome = handler(text)
    logger.debug("Demo %s on %r finished with %s", operation, text, outcome.type)
    return outcome


__all__ = [
    "DemoOutcome",
    "chain_demo",
    "parse_integer",
    "parse_number_demo",
    "parse_numbers",
    "process_demo_input",
    "resolve_language",
    "safe_divide",
    "safe_divide_demo",
    "select_language",
    "select_language_strict",
    "validate_less_than_100",
    "validate_positive",
]
