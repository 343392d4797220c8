"""Formatting of single conversion specifiers into text."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_INT_BITS = 32
_POINTER_BITS = 64


def _wrap_unsigned(n: int, bits: int) -> int:
    return n % (1 << bits)


def _wrap_signed(n: int, bits: int) -> int:
    n = _wrap_unsigned(n, bits)
    if n >= 1 << (bits - 1):
        n -= 1 << bits
    return n


def format_char(c: str | int) -> str:
    """Return a single character, given as a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c % 256)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def format_str(s: str | None) -> str:
    """Return the string up to its first NUL, or '(null)' for None."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s.split("\0", 1)[0]


def format_int(n: int) -> str:
    """Return the decimal form of n taken as a 32-bit signed integer."""
    return str(_wrap_signed(int(n), _INT_BITS))


def format_unsigned(n: int) -> str:
    """Return the decimal form of n taken as a 32-bit unsigned integer."""
    return str(_wrap_unsigned(int(n), _INT_BITS))


def format_hex(n: int, uppercase: bool) -> str:
    """Return the hexadecimal form of n taken as a 32-bit unsigned integer."""
    value = _wrap_unsigned(int(n), _INT_BITS)
    return format(value, "X" if uppercase else "x")


def format_pointer(address: int | None) -> str:
    """Return '0x' and the lowercase hex address, or '(nil)' for a null pointer."""
    if address is None:
        return NULL_POINTER
    value = _wrap_unsigned(int(address), _POINTER_BITS)
    if value == 0:
        return NULL_POINTER
    return "0x" + format(value, "x")


def _next_arg(args: Iterator[Any], specifier: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{specifier}") from None


_HANDLERS = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, False),
    "X": lambda n: format_hex(n, True),
}


def convert(specifier: str, args: Iterator[Any]) -> str:
    """Format one conversion, taking its argument from the iterator if it needs one.

    '%' yields a literal percent sign; an unknown specifier yields nothing and
    consumes no argument.
    """
    if specifier == "%":
        return "%"
    handler = _HANDLERS.get(specifier)
    if handler is None:
        return ""
    return handler(_next_arg(args, specifier))