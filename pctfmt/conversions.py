"""Rendering of single values for each supported conversion."""

from __future__ import annotations

_INT_BITS = 32
_LONG_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_ULONG_MASK = (1 << _LONG_BITS) - 1
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_FLAG_CHARS = frozenset("+ #0.-%")
_SIGNS = frozenset(" +")


def _to_int32(value: int) -> int:
    """Wrap an integer to the range of a signed 32-bit int."""
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _to_hex(value: int, upper: bool) -> str:
    digits = _HEX_UPPER if upper else _HEX_LOWER
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_char(value: int | str) -> str:
    """Render a character given as a one-character string or a code (byte-truncated)."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion needs exactly one character")
        return value
    return chr(value & 0xFF)


def format_str(value: str | None) -> str:
    """Render a string; a missing string prints as '(null)'."""
    return "(null)" if value is None else value


def format_int(value: int) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_to_int32(value))


def format_unsigned(value: int) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(value & _UINT_MASK)


def format_hex(value: int, upper: bool = False) -> str:
    """Render an unsigned 64-bit integer in hexadecimal, without prefix."""
    return _to_hex(value & _ULONG_MASK, upper)


def format_pointer(value: int | None) -> str:
    """Render an address as '0x...' or '(nil)' for zero."""
    if not value:
        return "(nil)"
    return "0x" + format_hex(value, False)


def format_signed_int(value: int, sign: str) -> str:
    """Render a 32-bit int with a leading ' ' or '+' for non-negative values."""
    if sign not in _SIGNS:
        raise ValueError(f"sign must be ' ' or '+', not {sign!r}")
    number = _to_int32(value)
    if number < 0:
        return "-" + str(-number)
    return sign + str(number)


def format_alternate_hex(value: int, upper: bool = False) -> str:
    """Render an unsigned 32-bit int in hex with a '0x'/'0X' prefix unless zero."""
    number = value & _UINT_MASK
    if number == 0:
        return "0"
    return ("0X" if upper else "0x") + _to_hex(number, upper)


def is_flag_char(char: str) -> bool:
    """Tell whether a character is consumed as a flag after '%'."""
    return char in _FLAG_CHARS