"""String and byte-buffer operations: searching, comparing, slicing and building.

Searches return the index of what they found, or ``None`` when nothing
matches. Comparisons return the difference between the first pair of
character (or byte) codes that differ, or 0 when the compared parts are equal.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _as_char(ch: CharLike) -> str:
    """Turn *ch* into a one-character string; integer codes are taken as bytes."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an integer code, got {type(ch).__name__}")
    return chr(ch & 0xFF)


def _check_count(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"count {n} exceeds buffer length {len(buffer)}")


def split(text: str, sep: CharLike) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    separator = _as_char(sep)
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from index *start*.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *length* characters of *haystack*.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters, stopping at the end of either string.

    A shorter string compares as if it ended in a character with code 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for a, b in islice(zip_longest(first, second, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first *ch* in *text*.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(ch)
    index = text.find(target)
    if index >= 0:
        return index
    return len(text) if target == _NUL else None


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last *ch* in *text*.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(ch)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of *text*."""
    return "".join(func(index, char) for index, char in enumerate(text))


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value & 0xFF`` within the first *n* bytes."""
    _check_count(n, data)
    index = bytes(data).find(value & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first *n* bytes of two buffers as unsigned values."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0