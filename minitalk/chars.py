"""Character classification, case mapping and integer/text conversion.

Every classifier accepts either a one-character string or an integer code
and looks only at the ASCII range, the way the C locale does.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, which is a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _to_int32(value: int) -> int:
    """Wrap *value* into the range of a signed 32-bit integer."""
    value %= _INT_MOD
    return value + 2 * _INT_MIN if value >= -_INT_MIN else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, then one optional sign, then as many
    digits as follow. Anything after them is ignored; text with no digits
    gives 0. The result wraps like a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of *n*, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, from space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _shift_case(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is.

    A string argument gives a string back, an integer code gives an integer.
    """
    return _shift_case(c, "a", "z", ord("A") - ord("a"))


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is.

    A string argument gives a string back, an integer code gives an integer.
    """
    return _shift_case(c, "A", "Z", ord("a") - ord("A"))