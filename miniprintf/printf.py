"""Rendering and printing of format strings."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from miniprintf.conversions import convert


def render(fmt: str, *args: Any) -> str:
    """Return fmt with each conversion replaced by its formatted argument."""
    arg_iter = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            specifier = next(chars, None)
            if specifier is None:
                parts.append(ch)
            else:
                parts.append(convert(specifier, arg_iter))
        else:
            parts.append(ch)
    return "".join(parts)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered format to file (standard output by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)