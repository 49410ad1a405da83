# pctfmt

A small percent-style formatter. It knows a fixed set of conversions and
flags. It renders values the way a C-style `printf` does on a platform with a
32-bit `int`.

## Installation

```
pip install .
```

## Usage

```python
from pctfmt.printf import sprintf, printf

sprintf("%d apples and %s", 42, "pears")   # '42 apples and pears'
sprintf("%+d / % d", 7, 7)                 # '+7 /  7'
sprintf("%#x %#X", 255, 255)               # '0xff 0XFF'
sprintf("%p", 0)                           # '(nil)'
sprintf("100%%")                           # '100%'

count = printf("%u items\n", 3)            # writes to stdout, returns 8
```

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args, file=None)`
writes that text to standard output, or to the text stream given as `file`.
It returns the number of characters written.

### Conversions

| Spec | Meaning |
|------|---------|
| `%c` | a one-character string, or an integer code reduced to its low byte |
| `%s` | a string; `None` prints `(null)` |
| `%d`, `%i` | an integer wrapped to a signed 32-bit value |
| `%u` | an integer wrapped to an unsigned 32-bit value |
| `%x`, `%X` | an integer wrapped to unsigned 32 bits, in lower- or upper-case hex |
| `%p` | an address as `0x...` in lower-case hex; `0` or `None` prints `(nil)` |
| `%%` | a literal percent sign |

An unknown conversion character after `%` is consumed and produces no output.
A `%` at the very end of the format produces no output either.

### Flags

Any run of the characters `+`, space, `#`, `0`, `.`, `-` and `%` right after a
`%` is read as flags. Three of them have an effect:

* `#` with `x` or `X` adds a `0x` or `0X` prefix. A zero value prints as `0`.
* A space with `d` or `i` puts a space before values that are not negative.
* `+` with `d` or `i` puts a `+` before values that are not negative.

When both a space and `+` are given, the space wins. The other flag
characters are accepted and ignored.

### Errors

`FormatArgumentError`, a subclass of `TypeError`, is raised when the format
needs more arguments than were given, or when an argument does not suit its
conversion. For example, a non-integer for `%d`, a non-string for `%s`, or a
string longer than one character for `%c`. Extra arguments are ignored.

### Single conversions

`pctfmt.conversions` provides each conversion as its own function:

* `format_char(value)`
* `format_str(value)`
* `format_int(value)`
* `format_unsigned(value)`
* `format_hex(value, upper=False)`: masks to 64 bits, no prefix.
* `format_pointer(value)`
* `format_signed_int(value, sign)`: `sign` must be `" "` or `"+"`, otherwise `ValueError`.
* `format_alternate_hex(value, upper=False)`

`is_flag_char(char)` tells whether a character is read as a flag.

## What it does not do

Field widths, precisions, zero padding and left alignment are not supported.
Digits, `.` and `-` in a directive change nothing. There are no
floating-point conversions and no length modifiers such as `l` or `h`.