import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    ParseError,
    has_duplicates,
    has_empty_argument,
    is_blank,
    is_number,
    parse_arguments,
    split_words,
    to_int,
)


def test_split_words_drops_empty_pieces():
    assert split_words("  3 1   2 ") == ["3", "1", "2"]


def test_split_words_splits_on_spaces_only():
    assert split_words("1\t2") == ["1\t2"]


def test_split_words_of_blank_text_is_empty():
    assert split_words("    ") == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+42", 42),
        ("  -7", -7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("+2147483647", 2147483647),
    ],
)
def test_to_int_reads_values(text, expected):
    assert to_int(text) == expected


def test_to_int_bounds_match_constants():
    assert to_int(str(INT_MAX)) == INT_MAX
    assert to_int(str(INT_MIN)) == INT_MIN


def test_to_int_ignores_leading_zeros_before_width_check():
    assert to_int("0000000000000000042") == 42
    assert to_int("-000000000000000000") == 0


def test_to_int_stops_at_first_non_digit():
    assert to_int("12ab") == 12


@pytest.mark.parametrize(
    "text",
    ["2147483648", "-2147483649", "99999999999", "123456789012", "1abcdefghijkl"],
)
def test_to_int_rejects_out_of_range(text):
    with pytest.raises(ParseError):
        to_int(text)


@pytest.mark.parametrize("text", ["0", "12", "-5", "+5", "007"])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["-", "+", "--1", "1-", "a", "1.5", "+-1", "1\t", "\u0663"])
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_is_blank():
    assert is_blank("") is True
    assert is_blank(" \t\n\v\f\r") is True
    assert is_blank(" 1 ") is False


def test_has_empty_argument():
    assert has_empty_argument(["1", ""]) is True
    assert has_empty_argument(["1", " \t "]) is True
    assert has_empty_argument(["1", " 2 3 "]) is False


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False


def test_parse_arguments_keeps_order_across_arguments():
    assert parse_arguments(["3 1", "2", " -4 "]) == [3, 1, 2, -4]


def test_parse_arguments_without_arguments():
    assert parse_arguments([]) == []


@pytest.mark.parametrize(
    "values",
    [[5], [2, 1], [INT_MIN, 0, INT_MAX], [10, -3, 7, 8, -100, 55]],
)
def test_parse_arguments_round_trip(values):
    joined = " ".join(str(value) for value in values)
    assert parse_arguments([joined]) == values
    assert parse_arguments([str(value) for value in values]) == values


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["0", "-0"],
        ["1 2 1"],
        ["a"],
        ["1", ""],
        ["   "],
        ["+"],
        ["1-"],
        ["1\t2"],
        ["2147483648"],
        ["-2147483649"],
    ],
)
def test_parse_arguments_errors(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])