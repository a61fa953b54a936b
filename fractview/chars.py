"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code.  Conversions return a value of the same kind as given.
"""

from typing import Union

Char = Union[str, int]


def _code(ch: Char) -> int:
    """Return the integer code of *ch*, validating its form."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, int) and not isinstance(ch, bool):
        return ch
    raise TypeError(f"expected a character or an integer code, got {type(ch).__name__}")


def is_upper(ch: Char) -> bool:
    """True for 'A' to 'Z'."""
    return ord("A") <= _code(ch) <= ord("Z")


def is_lower(ch: Char) -> bool:
    """True for 'a' to 'z'."""
    return ord("a") <= _code(ch) <= ord("z")


def is_alpha(ch: Char) -> bool:
    """True for an ASCII letter."""
    return is_upper(ch) or is_lower(ch)


def is_digit(ch: Char) -> bool:
    """True for '0' to '9'."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alnum(ch: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(ch) <= 127


def is_space(ch: Char) -> bool:
    """True for a space or any of '\\t', '\\n', '\\v', '\\f', '\\r'."""
    code = _code(ch)
    return code == ord(" ") or ord("\t") <= code <= ord("\r")


def is_sign(ch: Char) -> bool:
    """True for '+' or '-'."""
    return _code(ch) in (ord("+"), ord("-"))


def is_print(ch: Char) -> bool:
    """True for printable ASCII, ' ' to '~'."""
    return ord(" ") <= _code(ch) <= ord("~")


def _shift(ch: Char, delta: int) -> Char:
    code = _code(ch) + delta
    return chr(code) if isinstance(ch, str) else code


def to_upper(ch: Char) -> Char:
    """Map a lower-case ASCII letter to upper case; leave anything else."""
    return _shift(ch, ord("A") - ord("a")) if is_lower(ch) else ch


def to_lower(ch: Char) -> Char:
    """Map an upper-case ASCII letter to lower case; leave anything else."""
    return _shift(ch, ord("a") - ord("A")) if is_upper(ch) else ch