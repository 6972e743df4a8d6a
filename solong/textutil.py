"""String helpers that treat a newline as the end of the text.

Most of these helpers measure text only up to the first newline, so a
line read from a file keeps its trailing newline without it being counted.
"""

from __future__ import annotations

from typing import Callable, List, Optional

_NUL = "\0"


def _char_at(text: str, index: int) -> str:
    """Return the character at index, or NUL past the end of the text."""
    return text[index] if index < len(text) else _NUL


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def line_length(text: str) -> int:
    """Return the number of characters before the first newline or NUL."""
    for index, char in enumerate(text):
        if char in ("\n", _NUL):
            return index
    return len(text)


def differs_from(text: str, char: str) -> bool:
    """True if any character before the first newline is not char."""
    _check_char(char)
    return any(c != char for c in text[: line_length(text)])


def substr(text: str, start: int, length: int) -> str:
    """Return up to length characters of text from start.

    The copy never runs past the first newline. A start beyond the first
    newline, or a zero length, gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if not length or start > line_length(text):
        return ""
    count = min(line_length(text[start:]), length)
    return text[start : start + count]


def split(text: str, separator: str) -> List[str]:
    """Split text on separator, dropping empty words.

    Each word is cut at the first newline it holds, and words that start
    past the first newline of the text come out empty.
    """
    _check_char(separator)
    words: List[str] = []
    position = 0
    size = len(text)
    while True:
        while position < size and text[position] == separator:
            position += 1
        if position >= size:
            break
        begin = position
        while position < size and text[position] != separator:
            position += 1
        words.append(substr(text, begin, position - begin))
    return words


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most count characters; return the difference of the first mismatch."""
    _check_non_negative("count", count)
    index = 0
    while index < count:
        a = _char_at(first, index)
        b = _char_at(second, index)
        if a == _NUL and b == _NUL:
            break
        if a != b:
            return ord(a) - ord(b)
        index += 1
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of needle in the first length characters of haystack.

    Only the part of needle before its first newline is matched. An empty
    needle matches at index 0. None means no match.
    """
    _check_non_negative("length", length)
    if _char_at(needle, 0) == _NUL:
        return 0
    if length == 0:
        return None
    needle_size = line_length(needle)
    first = needle[0]
    for index, char in enumerate(haystack):
        if index >= length or char == _NUL:
            break
        if (
            char == first
            and index + needle_size <= length
            and strncmp(haystack[index:], needle, needle_size) == 0
        ):
            return index
    return None


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last char at or before the first newline.

    Searching for NUL gives the length of the first line. None means the
    character does not occur there.
    """
    _check_char(char)
    end = line_length(text)
    if char == _NUL:
        return end
    for index in range(end, -1, -1):
        if _char_at(text, index) == char:
            return index
    return None


def mapi(text: str, func: Callable[[int, str], str]) -> str:
    """Apply func(index, char) to each character before the first newline."""
    return "".join(func(index, char) for index, char in enumerate(text[: line_length(text)]))