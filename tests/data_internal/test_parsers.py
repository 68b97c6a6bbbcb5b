from returns.result import Failure, Success

from monado.data._internal.parsers import (
    BasicParser,
    DictParser,
    ListParser,
    OptionalParser,
    snippet_parser,
    string_list_parser,
)


def test_basic_parser_success_and_failure() -> None:
    is_int = BasicParser[int](type_check=lambda x: isinstance(x, int), type_name="int")
    ok = is_int.parse(3)
    err = is_int.parse("nope")

    assert isinstance(ok, Success)
    assert ok.unwrap() == 3

    assert isinstance(err, Failure)
    assert "Expected int" in err.failure()


def test_list_parser_success_and_element_error() -> None:
    list_parser = string_list_parser()

    ok = list_parser.parse(["a", "b"])
    assert isinstance(ok, Success)
    assert ok.unwrap() == ["a", "b"]

    bad = list_parser.parse(["a", 1])
    assert isinstance(bad, Failure)
    msg = bad.failure()
    assert "element 1" in msg and "Expected string" in msg

    not_list = ListParser(list_parser).parse({})
    assert isinstance(not_list, Failure)
    assert "Expected list" in not_list.failure()


def test_dict_parser_success_and_missing_field() -> None:
    a_parser = BasicParser[int](type_check=lambda x: isinstance(x, int), type_name="int")
    b_parser = BasicParser[str](type_check=lambda x: isinstance(x, str), type_name="string")

    parser = DictParser(
        field_parsers={"a": a_parser, "b": b_parser},
        constructor=lambda a, b: (a, b),
    )

    ok = parser.parse({"a": 7, "b": "hi"})
    assert isinstance(ok, Success)
    assert ok.unwrap() == (7, "hi")

    missing = parser.parse({"a": 7})
    assert isinstance(missing, Failure)
    assert "Missing required field: b" in missing.failure()


def test_dict_parser_uses_optional_default_for_missing_field() -> None:
    parser = DictParser(
        field_parsers={"tags": OptionalParser(string_list_parser(), [])},
        constructor=lambda tags: tags,
    )

    absent = parser.parse({})
    assert isinstance(absent, Success)
    assert absent.unwrap() == []

    wrong = parser.parse({"tags": "not-a-list"})
    assert isinstance(wrong, Failure)
    assert "Error parsing field 'tags'" in wrong.failure()


def test_dict_parser_reports_constructor_failure() -> None:
    def reject(**_kwargs):
        raise ValueError("rejected")

    parser = DictParser(field_parsers={}, constructor=reject)
    res = parser.parse({})
    assert isinstance(res, Failure)
    assert res.failure() == "Failed to construct object: rejected"


def test_snippet_parser_joins_lines() -> None:
    parser = snippet_parser()

    assert parser.parse(["def f():", "    return 1"]).unwrap() == "def f():\n    return 1"
    assert parser.parse("x = 1").unwrap() == "x = 1"

    bad = parser.parse(["ok", 2])
    assert isinstance(bad, Failure)
    assert "Expected string or list of strings" in bad.failure()
