import pytest

from script_editor.ops import (
    Append,
    Delete,
    Invalid,
    Print,
    Undo,
    is_invalid,
    parse_count,
    parse_operation,
    parse_script,
)
from script_editor.ops.parser import iter_lines


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("1 abc", Append("abc")),
        ("1  abc", Append(" abc")),
        ("1  ", Append(" ")),
        ("1 abc def ghi", Append("abc def ghi")),
        ("1      xy", Append("     xy")),
        ("1", Append("")),
        ("1\tabc", Append("abc")),
        ("3 3", Print(3)),
        ("3          3", Print(3)),
        ("3 0", Print(0)),
        ("2 3", Delete(3)),
        ("2      3", Delete(3)),
        ("2 +4", Delete(4)),
        ("4", Undo()),
        ("4 ", Undo()),
        ("4 whatever follows", Undo()),
        ("    1 abc", Append("abc")),
        ("5", Invalid()),
        ("", Invalid()),
        (" ", Invalid()),
        ("    ", Invalid()),
        ("__BADOPERATION__", Invalid()),
    ],
)
def test_parse_operation(line: str, expected: object) -> None:
    assert parse_operation(line) == expected


@pytest.mark.parametrize("line", ["2", "2 ", "2 x", "3 -1", "3 1.5", "2 1 2", "3 ٣"])
def test_numeric_commands_reject_bad_operands(line: str) -> None:
    assert parse_operation(line) == Invalid()


def test_parse_operation_is_deterministic() -> None:
    lines = ["1 hello", "2 3", "3 1", "4", "junk"]

    first = [parse_operation(line) for line in lines]
    second = [parse_operation(line) for line in lines]

    assert first == second


def test_parse_count_accepts_digits_only() -> None:
    assert parse_count("12") == 12
    assert parse_count("+7") == 7
    assert parse_count("") is None
    assert parse_count(" 3") is None
    assert parse_count("-1") is None
    assert parse_count("1_000") is None


def test_iter_lines_handles_crlf_and_trailing_newline() -> None:
    assert list(iter_lines("2\r\n1 a\r\n4\n")) == ["2", "1 a", "4"]
    assert list(iter_lines("1\n\n")) == ["1", ""]
    assert list(iter_lines("")) == []


def test_parse_script_keeps_order_and_invalid_lines() -> None:
    parsed = parse_script("4\n1 abc\n2 1\nnope\n4\n")

    assert parsed == (
        4,
        [Append("abc"), Delete(1), Invalid(), Undo()],
    )


def test_parse_script_indented_lines() -> None:
    text = "8\n    1 abc\n    3 3\n    2 3\n    1 xy\n    3 2\n    4 \n    4 \n    3 1"

    count, operations = parse_script(text)

    assert count == 8
    assert operations == [
        Append("abc"),
        Print(3),
        Delete(3),
        Append("xy"),
        Print(2),
        Undo(),
        Undo(),
        Print(1),
    ]


@pytest.mark.parametrize("text", ["", "abc\n1 a\n", " 2\n1 a\n1 b\n", "-1\n", "2 \n"])
def test_parse_script_rejects_malformed_header(text: str) -> None:
    assert parse_script(text) is None


def test_parse_script_header_only() -> None:
    assert parse_script("0\n") == (0, [])


def test_is_invalid() -> None:
    assert is_invalid(Invalid())
    assert not is_invalid(Undo())


def test_models_reject_negative_payloads() -> None:
    with pytest.raises(ValueError):
        Delete(-1)
    with pytest.raises(ValueError):
        Print(-1)
