"""Percent-style formatting of a template with positional arguments."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from pctfmt.conversions import (
    format_alternate_hex,
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_signed_int,
    format_str,
    format_unsigned,
)

_DIRECTIVE = re.compile(r"%%|%([-+ #0.%]*)(.?)", re.DOTALL)
_UINT_MASK = 0xFFFFFFFF


class FormatArgumentError(TypeError):
    """Raised when an argument is missing or unsuitable for its conversion."""


def _next(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatArgumentError(
            f"missing argument for conversion %{conversion}"
        ) from None


def _integer(args: Iterator[Any], conversion: str) -> int:
    value = _next(args, conversion)
    try:
        return operator.index(value)
    except TypeError:
        raise FormatArgumentError(
            f"conversion %{conversion} needs an integer, got {type(value).__name__}"
        ) from None


def _string(args: Iterator[Any]) -> str | None:
    value = _next(args, "s")
    if value is not None and not isinstance(value, str):
        raise FormatArgumentError(
            f"conversion %s needs a string or None, got {type(value).__name__}"
        )
    return value


def _char(args: Iterator[Any]) -> str:
    value = _next(args, "c")
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatArgumentError("conversion %c needs a single character")
        return format_char(value)
    try:
        return format_char(operator.index(value))
    except TypeError:
        raise FormatArgumentError(
            f"conversion %c needs a character, got {type(value).__name__}"
        ) from None


def _pointer(args: Iterator[Any]) -> str:
    value = _next(args, "p")
    if value is None:
        return format_pointer(None)
    try:
        return format_pointer(operator.index(value))
    except TypeError:
        raise FormatArgumentError(
            f"conversion %p needs an address, got {type(value).__name__}"
        ) from None


def _convert(flags: str, conversion: str, args: Iterator[Any]) -> str:
    if conversion in ("x", "X") and "#" in flags:
        return format_alternate_hex(_integer(args, conversion), conversion == "X")
    if conversion in ("d", "i"):
        if " " in flags:
            return format_signed_int(_integer(args, conversion), " ")
        if "+" in flags:
            return format_signed_int(_integer(args, conversion), "+")
        return format_int(_integer(args, conversion))
    if conversion == "s":
        return format_str(_string(args))
    if conversion == "c":
        return _char(args)
    if conversion == "u":
        return format_unsigned(_integer(args, conversion))
    if conversion == "p":
        return _pointer(args)
    if conversion in ("x", "X"):
        value = _integer(args, conversion) & _UINT_MASK
        return format_hex(value, conversion == "X")
    # Unknown conversion characters are swallowed without output.
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the resulting text."""
    remaining = iter(args)

    def replace(match: re.Match[str]) -> str:
        if match.group(0) == "%%":
            return "%"
        return _convert(match.group(1), match.group(2), remaining)

    return _DIRECTIVE.sub(replace, fmt)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)