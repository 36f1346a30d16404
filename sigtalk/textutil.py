"""Small text helpers: integer parsing, ASCII classification and C-style string routines."""

from __future__ import annotations

from itertools import zip_longest
from typing import Union

Char = Union[str, int]

_INT_BITS = 32
_LONG_BITS = 64
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _code(ch: Char) -> int:
    """Return the code of a one-character string or pass an int through."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, int):
        return ch
    raise TypeError(f"expected a character or an int, got {type(ch).__name__}")


def _wrap(value: int, bits: int) -> int:
    """Wrap an integer into a signed two's-complement range of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    pos = 0
    end = len(text)
    while pos < end and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < end and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap(value * sign, bits)


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way atoi does, wrapping to 32 bits.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0.
    """
    return _parse(text, _INT_BITS)


def parse_long(text: str) -> int:
    """Parse a leading decimal integer like :func:`parse_int`, wrapping to 64 bits."""
    return _parse(text, _LONG_BITS)


def int_to_str(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def is_space(ch: Char) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    code = _code(ch)
    return 9 <= code <= 13 or code == 32


def is_digit(ch: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alpha(ch: Char) -> bool:
    """True for ASCII letters."""
    code = _code(ch)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_alnum(ch: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(ch) or is_alpha(ch)


def is_ascii(ch: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(ch) <= 127


def is_print(ch: Char) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(ch) <= 126


def to_lower(ch: Char) -> Char:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    code = _code(ch)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(ch, str) else code


def to_upper(ch: Char) -> Char:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    code = _code(ch)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(ch, str) else code


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int:
    """Index of the first ``needle`` lying wholly in the first ``limit`` characters.

    An empty needle is found at 0; otherwise -1 means not found.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    return haystack[:limit].find(needle)


def _as_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def compare(s1: Union[str, bytes], s2: Union[str, bytes]) -> int:
    """Difference of the first differing unsigned bytes, or 0 when equal."""
    for a, b in zip_longest(_as_bytes(s1), _as_bytes(s2), fillvalue=0):
        if a != b:
            return a - b
    return 0


def compare_n(s1: Union[str, bytes], s2: Union[str, bytes], n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` bytes."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(_as_bytes(s1)[:n], _as_bytes(s2)[:n])


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; a length not
    smaller than ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return src[:max(size - 1, 0)], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had, counting ``dest`` as at most ``size`` long.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = min(len(dest), size)
    result = dest
    if used < size:
        result = dest + src[:size - 1 - used]
    return result, used + len(src)