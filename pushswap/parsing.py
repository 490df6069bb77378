"""Validation and parsing of the integers given on the command line."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line integers are malformed, out of range or repeated."""


def is_space(char: str) -> bool:
    """True for the six ASCII whitespace characters."""
    return char in _SPACES


def is_number(token: str) -> bool:
    """True for an optional sign followed by at least one ASCII digit."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all(char in _DIGITS for char in body)


def _tokens(argument: str) -> list[str]:
    return [token for token in argument.split(" ") if token]


def is_valid_arguments(args: Iterable[str]) -> bool:
    """Check that every argument holds only space-separated numbers.

    An argument made of whitespace alone, or an empty one, is invalid.
    """
    for argument in args:
        if all(is_space(char) for char in argument):
            return False
        if not all(is_number(token) for token in _tokens(argument)):
            return False
    return True


def parse_int(token: str) -> int:
    """Read a 32-bit signed integer from the start of ``token``.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. Raises ArgumentError when the value does not fit.
    """
    text = token.lstrip("".join(_SPACES))
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    number = 0
    for char in takewhile(lambda c: c in _DIGITS, text):
        number = number * 10 + int(char)
        if (not negative and number > INT_MAX) or (negative and -number < INT_MIN):
            raise ArgumentError(f"integer out of range: {token!r}")
    return -number if negative else number


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the arguments into the list of integers, top of the stack first.

    Raises ArgumentError for malformed input, out-of-range values and
    duplicates.
    """
    args = list(args)
    if not is_valid_arguments(args):
        raise ArgumentError("malformed arguments")
    values: list[int] = []
    seen: set[int] = set()
    for argument in args:
        for token in _tokens(argument):
            value = parse_int(token)
            if value in seen:
                raise ArgumentError(f"duplicate value: {value}")
            seen.add(value)
            values.append(value)
    return values