"""Formatted output with the conversions c, s, p, d, i, u, x, X and %.

Integers are taken as C ``int``/``unsigned int`` would take them: %d and %i
wrap to a signed 32-bit value, %u, %x and %X to an unsigned one.
"""

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

CONVERSIONS = "cspdiuxX%"
_HEX_DIGITS = "0123456789abcdef"


class FormatError(ValueError):
    """Raised for a format that ends in a lone '%' or lacks arguments."""


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"%{conversion} needs an integer, got {type(value).__name__}")
    return value


def count_digits(number: int, base: int) -> int:
    """Return how many digits *number* has in *base*; zero has one digit."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    if number == 0:
        return 1
    digits = 0
    while number:
        digits += 1
        number //= base
    return digits


def to_hex(number: int, upper: bool) -> str:
    """Return *number* in hexadecimal, with upper-case letters if *upper*."""
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    digits = []
    while True:
        number, rest = divmod(number, 16)
        digits.append(_HEX_DIGITS[rest])
        if number == 0:
            break
    text = "".join(reversed(digits))
    return text.upper() if upper else text


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"no argument left for %{conversion}") from None
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise FormatError(f"%c needs a single character, got {value!r}")
            return value
        return chr(_as_int(value, conversion) & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        if value is None or value == 0:
            return "(nil)"
        return "0x" + to_hex(_as_int(value, conversion), False)
    if conversion in "di":
        return str(_int32(_as_int(value, conversion)))
    if conversion == "u":
        return str(_uint32(_as_int(value, conversion)))
    return to_hex(_uint32(_as_int(value, conversion)), conversion == "X")


def _render(fmt: str, args: tuple) -> Iterator[str]:
    """Yield the output piece by piece; raise FormatError on a trailing '%'."""
    remaining = iter(args)
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        following = fmt[i + 1] if i + 1 < len(fmt) else ""
        if ch == "%" and following and following in CONVERSIONS:
            yield _convert(following, remaining)
            i += 2
        elif ch == "%" and not following:
            raise FormatError("format ends with a lone '%'")
        else:
            yield ch
            i += 1


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by *args*."""
    if fmt is None:
        raise FormatError("format must not be None")
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters written.  On a trailing '%' the text
    before it has already been written when FormatError is raised.
    """
    if fmt is None:
        raise FormatError("format must not be None")
    out = sys.stdout if file is None else file
    written = 0
    for piece in _render(fmt, args):
        out.write(piece)
        written += len(piece)
    return written


def putchar_fd(ch: str, file: TextIO) -> None:
    """Write the single character *ch* to *file*."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    file.write(ch)


def putstr_fd(text: str, file: TextIO) -> None:
    """Write *text* to *file*."""
    file.write(text)


def putendl_fd(text: str, file: TextIO) -> None:
    """Write *text* followed by a newline to *file*."""
    file.write(text)
    file.write("\n")


def putnbr_fd(number: int, file: TextIO) -> None:
    """Write *number*, as a signed 32-bit integer, in decimal to *file*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    file.write(str(_int32(number)))