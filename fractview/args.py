"""Command-line arguments: fractal choice and Julia constants."""

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from fractview.chars import is_digit, is_sign
from fractview.strings import atoi, substr

JULIA_LIMIT = 2.0
PROGRAM = "fractview"


class FractalType(enum.IntEnum):
    MANDELBROT = 0
    JULIA = 1


@dataclass(frozen=True)
class FractalSpec:
    """The fractal to draw; *real* and *imag* are the Julia constant."""

    kind: FractalType
    real: float = 0.0
    imag: float = 0.0

    @property
    def c(self) -> complex:
        return complex(self.real, self.imag)


class InvalidArgumentsError(ValueError):
    """Raised when the command-line arguments do not select a fractal."""


def is_number(text: str) -> bool:
    """True for an optional sign, digits and at most one '.' that a digit follows.

    The empty string and a lone sign are accepted.
    """
    if text and is_sign(text[0]):
        text = text[1:]
    points = 0
    for i, ch in enumerate(text):
        if is_digit(ch):
            continue
        if ch == "." and i + 1 < len(text) and is_digit(text[i + 1]):
            points += 1
            if points > 1:
                return False
            continue
        return False
    return True


def decimal_places(text: str) -> int:
    """Return the number of characters after the first '.', or 0 without one."""
    _, point, fraction = text.partition(".")
    return len(fraction) if point else 0


def parse_decimal(text: str) -> float:
    """Parse a decimal such as "-0.285" into a float."""
    sign = 1.0
    if text.startswith("-"):
        sign = -1.0
        text = text[1:]
    places = decimal_places(text)
    value = float(atoi(substr(text, 0, len(text) - places)))
    if places:
        value += atoi(substr(text, len(text) - places, places)) / 10.0**places
    return value * sign


def parse_args(args: Sequence[str]) -> FractalSpec:
    """Select the fractal from the arguments that follow the program name.

    "M" alone gives the Mandelbrot set; "J" with two numbers between -2.0
    and 2.0 gives a Julia set.  Anything else raises InvalidArgumentsError.
    """
    if not 1 <= len(args) <= 3:
        raise InvalidArgumentsError(f"expected 1 to 3 arguments, got {len(args)}")
    name = args[0]
    if name == "M" and len(args) == 1:
        return FractalSpec(FractalType.MANDELBROT)
    if name == "J" and len(args) == 3:
        if not (is_number(args[1]) and is_number(args[2])):
            raise InvalidArgumentsError("Julia constants must be decimal numbers")
        real = parse_decimal(args[1])
        imag = parse_decimal(args[2])
        if not (-JULIA_LIMIT <= real <= JULIA_LIMIT and -JULIA_LIMIT <= imag <= JULIA_LIMIT):
            raise InvalidArgumentsError("Julia constants must be between -2.0 and 2.0")
        return FractalSpec(FractalType.JULIA, real, imag)
    raise InvalidArgumentsError(f"unknown fractal selection: {' '.join(args)}")


def usage_text() -> str:
    """Return the banner and the list of fractals shown for bad arguments."""
    return (
        "\n+========================================================+\n"
        "|                       FRACT'OL                         |\n"
        "+========================================================+\n\n"
        "+=================  Available Fractals  =================+\n"
        "Select fractal you want to view.\n"
        "\tM - Mandelbrot\n"
        "\tJ - Julia\n"
        f"\033[32mUsage example:\t{PROGRAM} <type>\n\t\t{PROGRAM} M\033[0m\n"
        "\nFor Julia, you may specify starting values for the ini-\n"
        "tial fractal shape. Values must be between -2.0 and 2.0.\n"
        "\n"
        f"\033[32mUsage example:\t{PROGRAM} J\n\t\t{PROGRAM} J 0.285 0.01\033[0m\n\n"
    )