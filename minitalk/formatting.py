"""A small printf-style formatter with a fixed set of conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Any other character after ``%`` produces no
output and takes no argument. A ``%`` at the very end of the format is
written as is. Integer conversions wrap their argument to 32 bits, and
pointers to 64 bits.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT32 = (1 << 32) - 1
_UINT64 = (1 << 64) - 1
_INT32_SIGN = 1 << 31


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return int(value)


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & _INT32_SIGN else value


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _conv_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, _LOWER_DIGITS)


def _conv_signed(value: Any) -> str:
    return str(_to_int32(_require_int(value, "d")))


def _conv_unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT32)


def _conv_hex_lower(value: Any) -> str:
    return _hex(_require_int(value, "x") & _UINT32, _LOWER_DIGITS)


def _conv_hex_upper(value: Any) -> str:
    return _hex(_require_int(value, "X") & _UINT32, _UPPER_DIGITS)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    end = len(fmt)
    while pos < end:
        ch = fmt[pos]
        if ch == "%" and pos + 1 < end:
            spec = fmt[pos + 1]
            pos += 2
            if spec == "%":
                yield "%"
            elif spec in _CONVERTERS:
                yield _CONVERTERS[spec](_next_arg(args, spec))
        else:
            pos += 1
            yield ch


def format_message(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by the next argument."""
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)