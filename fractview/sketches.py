"""Small drawing sketches: circles, a Julia orbit and a bouncing pixel."""

import math
from collections.abc import Iterator
from typing import Tuple

from fractview.canvas import Canvas

ORBIT_COLOR = 0x00FF0000
ORBIT_SCALE = 100
ORBIT_MAX_STEPS = 1_000_000
BILLIARD_COLOR = 0x0098F5FF
BILLIARD_REFRESH = 20


def _lround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _circle_geometry(canvas: Canvas) -> Tuple[int, int, int]:
    """Return the centre and radius: the middle of the canvas, a quarter of its height."""
    radius = canvas.height // 4
    if radius <= 0:
        raise ValueError(f"canvas height {canvas.height} is too small for a circle")
    return canvas.width // 2, canvas.height // 2, radius


def _angles(radius: int) -> Iterator[float]:
    """Yield angles from 0 up to a full turn, one pixel of arc apart."""
    t = 0.0
    step = 1.0 / radius
    while t < 2 * math.pi:
        yield t
        t += step


def circle_outline(canvas: Canvas, color: int) -> Canvas:
    """Draw the outline of the centred circle and return the canvas."""
    cx, cy, radius = _circle_geometry(canvas)
    for t in _angles(radius):
        canvas.put_pixel(
            cx + _lround(radius * math.cos(t)),
            cy + _lround(radius * math.sin(t)),
            color,
        )
    return canvas


def filled_circle(canvas: Canvas, color: int) -> Canvas:
    """Fill the centred circle with radial spokes and return the canvas."""
    cx, cy, radius = _circle_geometry(canvas)
    for t in _angles(radius):
        cos_t, sin_t = math.cos(t), math.sin(t)
        for r in range(radius):
            canvas.put_pixel(cx + _lround(r * cos_t), cy + _lround(r * sin_t), color)
    return canvas


def julia_orbit(a: float, b: float, max_steps: int) -> Iterator[Tuple[float, float]]:
    """Yield the orbit of 0 under z*z + (a + bi).

    The starting point comes first.  The orbit ends after *max_steps*
    iterations, once a point lies farther than 2 from the origin, or when
    the next point equals the current one.
    """
    zx = zy = 0.0
    count = 0
    while True:
        yield zx, zy
        if count >= max_steps:
            return
        if math.hypot(zx, zy) > 2:
            return
        nx = zx * zx - zy * zy + a
        ny = 2.0 * zx * zy + b
        if nx == zx and ny == zy:
            return
        zx, zy = nx, ny
        count += 1


def draw_julia_orbit(canvas: Canvas, a: float, b: float) -> Canvas:
    """Plot the orbit of 0 for the constant a + bi, 100 pixels to a unit."""
    cx, cy = canvas.width // 2, canvas.height // 2
    for zx, zy in julia_orbit(a, b, ORBIT_MAX_STEPS):
        canvas.put_pixel(int(cx + ORBIT_SCALE * zx), int(cy + ORBIT_SCALE * zy), ORBIT_COLOR)
    return canvas


def billiard_position(step: int, width: int, height: int) -> Tuple[int, int]:
    """Return where the bouncing pixel is on frame *step*.

    The pixel moves two units along each axis per frame and reflects off
    the edges at *width* and *height*; the counter wraps at width * height.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"area must be positive, got {width}x{height}")
    if step < 0:
        raise ValueError(f"step must not be negative, got {step}")
    n = (2 * step) % (width * height)
    x = n % (2 * width)
    y = n % (2 * height)
    if x > width:
        x = 2 * width - x
    if y > height:
        y = 2 * height - y
    return x, y


def billiard_frames(canvas: Canvas, steps: int, color: int) -> Iterator[Tuple[int, int, bool]]:
    """Draw the bouncing pixel for *steps* frames, lazily.

    Each frame yields (x, y, refresh); refresh is True on the frames where
    the image would be shown, every twentieth counter value.
    """
    for step in range(steps):
        x, y = billiard_position(step, canvas.width, canvas.height)
        canvas.put_pixel(x, y, color)
        n = (2 * step) % (canvas.width * canvas.height)
        yield x, y, n % BILLIARD_REFRESH == 0