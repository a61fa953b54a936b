"""Escape-time iteration for the Mandelbrot and Julia sets, and the camera."""

from dataclasses import dataclass
from typing import Tuple

SIZE = 700
DEFAULT_ITER = 40
ZOOM_FACTOR = 0.60
ESCAPE_RADIUS = 2.0

COLOR_INSIDE = 0x00000000
COLOR_EVEN = 0x008B1A1A
COLOR_ODD = 0x00FF0000


@dataclass
class Camera:
    """Maps a square screen of *size* pixels onto the complex plane.

    (*zx*, *zy*) is the point at the screen centre and *scale* the width of
    one pixel in plane units.
    """

    zx: float = 0.0
    zy: float = 0.0
    scale: float = 4.0 / SIZE
    size: int = SIZE

    def to_complex(self, x: int, y: int) -> complex:
        """Return the plane point under screen pixel (*x*, *y*)."""
        dx = int(x - self.size / 2.0)
        dy = int(y - self.size / 2.0)
        return complex(self.zx + dx * self.scale, self.zy + dy * self.scale)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return the visible (x_min, x_max, y_min, y_max)."""
        half = 0.5 * self.size * self.scale
        return (self.zx - half, self.zx + half, self.zy - half, self.zy + half)

    def zoom(self, x: int, y: int, zoom_in: bool) -> None:
        """Zoom in or out, keeping the point under pixel (*x*, *y*) fixed."""
        dx = float(x) - 0.5 * self.size
        dy = float(y) - 0.5 * self.size
        zx = self.zx + dx * self.scale
        zy = self.zy + dy * self.scale
        if zoom_in:
            self.scale *= ZOOM_FACTOR
        else:
            self.scale /= ZOOM_FACTOR
        self.zx = zx - dx * self.scale
        self.zy = zy - dy * self.scale


_LIMIT = ESCAPE_RADIUS * ESCAPE_RADIUS


def julia_escape(camera: Camera, x: int, y: int, c: complex, max_iter: int) -> int:
    """Count iterations of z*z + c from the pixel's point before it escapes.

    Iteration also stops when the real part reaches a fixed point.
    """
    z = camera.to_complex(x, y)
    zr, zi = z.real, z.imag
    a, b = c.real, c.imag
    for k in range(max_iter):
        tmp = zr * zr - zi * zi + a
        zi = 2 * zr * zi + b
        if zr == tmp:
            return k
        zr = tmp
        if zr * zr + zi * zi > _LIMIT:
            return k
    return max(max_iter, 0)


def mandelbrot_escape(camera: Camera, x: int, y: int, max_iter: int) -> int:
    """Count iterations of z*z + c from zero, c being the pixel's point."""
    c = camera.to_complex(x, y)
    a, b = c.real, c.imag
    zr = zi = 0.0
    for k in range(max_iter):
        tmp = zr * zr - zi * zi + a
        zi = 2 * zr * zi + b
        zr = tmp
        if zr * zr + zi * zi > _LIMIT:
            return k
    return max(max_iter, 0)


def pixel_color(count: int, max_iter: int) -> int:
    """Black inside the set, alternating reds by parity of the escape count."""
    if count == max_iter:
        return COLOR_INSIDE
    return COLOR_EVEN if count % 2 == 0 else COLOR_ODD