"""Decimal integer parsing and formatting."""

from __future__ import annotations

from typing import IO

_SPACES = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit.
    Text with no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for char in text[pos:]:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def put_number(number: int, stream: IO[str]) -> None:
    """Write the decimal representation of an integer to a text stream."""
    stream.write(itoa(number))