import pytest

from monado import demo
from monado.monad.maybe import NOTHING, Just
from monado.monad.result import Err, Ok


@pytest.mark.parametrize(
    ("lang", "expected"),
    [
        ("Haskell", "haskell"),
        ("rust", "rust"),
        ("cobol", "elixir"),
        ("", "elixir"),
        (None, "elixir"),
    ],
)
def test_select_language_falls_back_to_default(lang, expected):
    assert demo.select_language(lang) == expected


def test_select_language_strict_reports_reason():
    assert demo.select_language_strict({"lang": "OCaml"}) == Ok("ocaml")
    assert demo.select_language_strict({}) == Err("Language not specified")
    assert demo.select_language_strict({"lang": ""}) == Err("Language cannot be empty")
    assert demo.select_language_strict(["lang"]) == Err("Invalid parameters")
    assert demo.select_language_strict({"lang": 3}) == Err("Language must be a string, got int")


def test_resolve_language_unwraps_with_default():
    assert demo.resolve_language({"lang": "Rust"}) == "rust"
    assert demo.resolve_language(None) == "elixir"


def test_parse_integer_requires_whole_string():
    assert demo.parse_integer("42") == Just(42)
    assert demo.parse_integer("-7") == Just(-7)
    assert demo.parse_integer("42abc") == NOTHING
    assert demo.parse_integer("4.2") == NOTHING
    assert demo.parse_integer("") == NOTHING


def test_parse_numbers():
    assert demo.parse_numbers("10, 2") == Ok((10.0, 2.0))
    assert demo.parse_numbers("10") == Err(
        "Please provide two numbers separated by comma (e.g., '10, 2')"
    )
    assert demo.parse_numbers("x, 2") == Err("Invalid number: x")
    assert demo.parse_numbers("1, y") == Err("Invalid number:  y")


def test_safe_divide():
    assert demo.safe_divide(10.0, 4.0) == Ok(2.5)
    assert demo.safe_divide(1.0, 0.0) == Err("Cannot divide by zero")


def test_process_demo_input_needs_both_fields():
    assert demo.process_demo_input("", "chain") is None
    assert demo.process_demo_input("5", "") is None
    assert demo.process_demo_input(None, None) is None


def test_process_demo_input_unknown_operation():
    outcome = demo.process_demo_input("5", "teleport")
    assert outcome.type == "error"
    assert outcome.message == "Unknown operation"


def test_safe_divide_demo():
    ok = demo.process_demo_input("10, 2", "safe_divide")
    assert ok.succeeded
    assert ok.message == "Result: 5.0"
    assert ok.steps[0] == "Parsed input: 10, 2"

    zero = demo.process_demo_input("10, 0", "safe_divide")
    assert not zero.succeeded
    assert zero.message == "Cannot divide by zero"
    assert "Error occurred: Cannot divide by zero" in zero.steps


def test_parse_number_demo():
    ok = demo.process_demo_input(" 21 ", "parse_number")
    assert ok.message == "Parsed and doubled: 42"
    assert ok.steps[-1] == "Result: Just(42)"

    bad = demo.process_demo_input("abc", "parse_number")
    assert bad.type == "error"
    assert bad.message == "Could not parse 'abc' as a number"


@pytest.mark.parametrize(
    ("text", "stage"),
    [
        ("abc", "1. Failed to parse 'abc' as integer ✗"),
        ("-3", "2. Failed: number is not positive ✗"),
        ("150", "3. Failed: number >= 100 ✗"),
    ],
)
def test_chain_demo_names_failing_stage(text, stage):
    outcome = demo.process_demo_input(text, "chain")
    assert outcome.message == "Validation failed"
    assert stage in outcome.steps


def test_chain_demo_success():
    outcome = demo.process_demo_input("42", "chain")
    assert outcome.succeeded
    assert outcome.message == "Valid! Result: 84"
    assert outcome.steps[-1] == "Final result: Just(84)"


def test_parse_integer_rejects_oversized_input():
    huge = "1" * 5000
    assert demo.parse_integer(huge) == NOTHING

    outcome = demo.parse_number_demo(huge)
    assert outcome.type == "error"
    assert outcome.message.startswith("Could not parse")

    chained = demo.process_demo_input(huge, "chain")
    assert chained.message == "Validation failed"


def test_parse_integer_accepts_only_ascii_digits():
    assert demo.parse_integer("١٢") == NOTHING
    assert demo.parse_integer("12") == Just(12)


@pytest.mark.parametrize("bad", ["inf", "nan", "-inf", "1_000", "1e999"])
def test_parse_numbers_rejects_non_finite_and_underscored(bad):
    assert demo.parse_numbers(f"10, {bad}") == Err(f"Invalid number:  {bad}")


def test_parse_numbers_accepts_plain_decimals():
    assert demo.parse_numbers("1.5, -2e1") == Ok((1.5, -20.0))
    assert demo.parse_numbers(".5,3.") == Ok((0.5, 3.0))
