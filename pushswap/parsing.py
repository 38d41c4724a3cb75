"""Validation and conversion of the command-line numbers given to the programs."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
# Longer than any int once leading zeros are gone, sign included.
_MAX_WIDTH = len("+2147483647")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def split_words(text: str) -> list[str]:
    """Split on single spaces only, dropping the empty pieces."""
    return [word for word in text.split(" ") if word]


def to_int(text: str) -> int:
    """Read a leading, optionally signed decimal integer that must fit in 32 bits.

    Leading whitespace is skipped and reading stops at the first non-digit.
    Raises ParseError when the number falls outside the 32-bit signed range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    rest = rest.lstrip("0")
    if not rest:
        return 0
    if len(rest) > _MAX_WIDTH:
        raise ParseError(f"number out of range: {text!r}")
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    value = sign * int(digits) if digits else 0
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"number out of range: {text!r}")
    return value


def is_number(text: str) -> bool:
    """Tell whether text is an optional sign followed only by ASCII digits."""
    body = text
    if text[:1] in ("-", "+") and text[1:2] and text[1] in _DIGITS:
        body = text[1:]
    return all(ch in _DIGITS for ch in body)


def is_blank(text: str) -> bool:
    """Tell whether text holds nothing but whitespace (an empty text counts)."""
    return all(ch in _WHITESPACE for ch in text)


def has_empty_argument(args: Iterable[str]) -> bool:
    """Tell whether any argument is empty or made only of whitespace."""
    return any(is_blank(arg) for arg in args)


def has_duplicates(values: Iterable[int]) -> bool:
    """Tell whether some value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments into the list of integers they hold, top first.

    Each argument may hold several numbers separated by spaces. Raises
    ParseError on an empty or blank argument, a word that is not an integer,
    a number outside the 32-bit range, or a repeated number.
    """
    if has_empty_argument(args):
        raise ParseError("empty argument")
    values: list[int] = []
    for arg in args:
        for word in split_words(arg):
            if not is_number(word):
                raise ParseError(f"not an integer: {word!r}")
            values.append(to_int(word))
    if has_duplicates(values):
        raise ParseError("duplicate numbers")
    return values