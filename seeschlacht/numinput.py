"""Reading whole numbers typed on the console."""

from __future__ import annotations

import sys
from typing import TextIO

_DIGITS = frozenset("0123456789")


def count_invalid_chars(text: str) -> int:
    """Count characters that are not part of a signed integer line.

    A leading ``+`` or ``-`` and a trailing newline are allowed.
    """
    if not text:
        return 0
    invalid = sum(1 for char in text if char not in _DIGITS)
    if text[0] in "+-":
        invalid -= 1
    if text[-1] == "\n":
        invalid -= 1
    return invalid


def _leading_int(text: str) -> int:
    """Value of the leading integer in ``text``, 0 if there is none."""
    body = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    digits = ""
    for char in body:
        if char not in _DIGITS:
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_int(text: str) -> int:
    """Return the integer in one input line; raise ValueError if it is not one."""
    if count_invalid_chars(text) != 0:
        raise ValueError(f"not a whole number: {text!r}")
    return _leading_int(text)


def read_int(stream: TextIO | None = None) -> int:
    """Read one line from ``stream`` (standard input by default) as an integer."""
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if not line:
        raise EOFError("no more input")
    return parse_int(line)