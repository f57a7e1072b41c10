"""Reading the list of numbers from command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WORD_SEPARATORS = re.compile(r"[ \n\t]+")
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


class InputError(ValueError):
    """The arguments do not form a valid list of distinct integers."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, tabs and newlines, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def parse_number(text: str) -> int:
    """Convert one argument to an integer within the 32-bit signed range.

    Leading whitespace and a single sign are allowed; anything after the
    digits is an error. A string with no digits reads as zero.
    """
    match = _NUMBER.match(text)
    if match is None or match.end() != len(text):
        raise InputError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the initial contents of stack a.

    A single argument is split into words; several arguments are taken one
    number each. The first number ends up on top. Duplicates are an error.
    """
    words = split_words(args[0]) if len(args) == 1 else list(args)
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        value = parse_number(word)
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)
        values.append(value)
    return values