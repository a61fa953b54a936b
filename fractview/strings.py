"""String helpers: number parsing and formatting, splitting, searching and copying.

Searches return indices (or None when nothing is found) where a pointer
into the string would otherwise be handed back.
"""

from collections.abc import Callable, MutableSequence
from itertools import chain, repeat
from typing import Any, Optional, Tuple

from fractview.chars import is_digit, is_sign, is_space

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)


def _to_int32(value: int) -> int:
    """Wrap *value* to a signed 32-bit integer, keeping its low 32 bits."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def _check_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit.  The value saturates at the 64-bit signed
    range and is then truncated to a signed 32-bit integer.
    """
    rest = text.lstrip("".join(c for c in text if is_space(c)))
    sign = 1
    if rest and is_sign(rest[0]):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not is_digit(ch):
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    value = max(LONG_MIN, min(LONG_MAX, value))
    return _to_int32(value)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from *start*.

    A start beyond the end of the text yields an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* within the first *length* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _check_non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, ch: str) -> Optional[int]:
    """Return the index of the first *ch* in *text*, or None.

    Searching for the terminator "\\0" gives the length of the text.
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> Optional[int]:
    """Return the index of the last *ch* in *text*, or None.

    Searching for the terminator "\\0" gives the length of the text.
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the difference of the character codes at the first mismatch,
    the end of a string counting as code 0, or 0 when they agree.
    """
    _check_non_negative(n, "n")
    codes1 = chain(map(ord, first), repeat(0))
    codes2 = chain(map(ord, second), repeat(0))
    for _, a, b in zip(range(n), codes1, codes2):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the copied text and the full length of *src*; the copy is
    truncated when the length is not less than *size*.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length it tried to create.  When
    *size* does not exceed the length of *dst*, *dst* is returned unchanged
    along with ``size + len(src)``.
    """
    _check_non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    return dst + src[:size - len(dst) - 1], len(dst) + len(src)


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Apply ``func(index, item)`` to every item of *text* in place.

    A result other than None replaces the item; None leaves it as it was.
    """
    for index, item in enumerate(text):
        result = func(index, item)
        if result is not None:
            text[index] = result