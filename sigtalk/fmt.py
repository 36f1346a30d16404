"""Minimal printf-style formatting and small writers for text streams."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_NULL_TEXT = "(null)"


def _to_int32(value: Any) -> int:
    n = operator.index(value) & _UINT_MASK
    return n - (1 << 32) if n >> 31 else n


def _to_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _as_text(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer_value(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _ULONG_MASK
    return id(value) & _ULONG_MASK


def hex_digits(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``n`` taken as a 32-bit unsigned integer."""
    return format(_to_uint32(n), "X" if upper else "x")


def address(value: Any) -> str:
    """Render a pointer-like value as ``0x`` followed by lower-case hex.

    ``None`` is the null address; an int is used as the address itself;
    any other object is represented by its identity.
    """
    return "0x" + format(_pointer_value(value), "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _as_char(arg)
    if spec == "s":
        return _as_text(arg)
    if spec == "p":
        return address(arg)
    if spec in "di":
        return str(_to_int32(arg))
    if spec == "u":
        return str(_to_uint32(arg))
    return hex_digits(arg, upper=(spec == "X"))


def render(template: str, *args: Any) -> str:
    """Format ``template`` with the conversions %c %s %p %d %i %u %x %X and %%.

    An unknown conversion character is consumed and produces nothing; a lone
    ``%`` at the very end is dropped. Surplus arguments are ignored.
    """
    values = iter(args)
    chars = iter(template)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, values))
    return "".join(out)


def printf(template: str, *args: Any) -> int:
    """Write the rendered template to standard output; return characters written."""
    text = render(template, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default); ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes just the newline."""
    out = _target(stream)
    put_str(text, out)
    out.write("\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal, taken as a 32-bit signed integer."""
    _target(stream).write(str(_to_int32(n)))