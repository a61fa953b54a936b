"""A world-coordinate zoom demo: a unit grid and a circle that zoom under the mouse."""

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from fractview.app import ESC, SCROLL_DOWN, SCROLL_UP, _run_window
from fractview.canvas import Canvas

WIDTH = 720
HEIGHT = 480
ZOOM_FACTOR = 0.9

BACKGROUND = 0x00FFFFFF
GRID_COLOR = 0x00808080
CIRCLE_COLOR = 0x008B0000
CIRCLE_STEP = 0.01


def _lround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class View:
    """A camera on the world plane: (cx, cy) at the screen centre, *scale* units per pixel."""

    cx: float = 0.0
    cy: float = 0.0
    scale: float = 0.01
    width: int = WIDTH
    height: int = HEIGHT

    def to_screen(self, wx: float, wy: float) -> Tuple[int, int]:
        """Return the pixel nearest to world point (*wx*, *wy*)."""
        sx = _lround((wx - self.cx) / self.scale) + self.width // 2
        sy = _lround((wy - self.cy) / self.scale) + self.height // 2
        return sx, sy

    def to_world(self, sx: int, sy: int) -> Tuple[float, float]:
        """Return the world point under pixel (*sx*, *sy*)."""
        wx = self.cx + (sx - 0.5 * self.width) * self.scale
        wy = self.cy + (sy - 0.5 * self.height) * self.scale
        return wx, wy

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return the visible (x_min, x_max, y_min, y_max)."""
        half_w = 0.5 * self.width * self.scale
        half_h = 0.5 * self.height * self.scale
        return (self.cx - half_w, self.cx + half_w, self.cy - half_h, self.cy + half_h)

    def zoom(self, x: int, y: int, zoom_in: bool) -> None:
        """Zoom in or out, keeping the world point under pixel (*x*, *y*) fixed."""
        wx, wy = self.to_world(x, y)
        if zoom_in:
            self.scale *= ZOOM_FACTOR
        else:
            self.scale /= ZOOM_FACTOR
        self.cx = wx - (float(x) - 0.5 * self.width) * self.scale
        self.cy = wy - (float(y) - 0.5 * self.height) * self.scale


def draw_vline(canvas: Canvas, x: int, color: int) -> None:
    """Draw a full-height vertical line at column *x*."""
    for y in range(canvas.height):
        canvas.put_pixel(x, y, color)


def draw_hline(canvas: Canvas, y: int, color: int) -> None:
    """Draw a full-width horizontal line at row *y*."""
    for x in range(canvas.width):
        canvas.put_pixel(x, y, color)


def draw_grid(canvas: Canvas, view: View) -> None:
    """Draw grey lines at the integer world coordinates in view."""
    x_min, x_max, y_min, y_max = view.bounds()
    for ix in range(math.floor(x_min), math.ceil(x_max)):
        draw_vline(canvas, view.to_screen(float(ix), view.cy)[0], GRID_COLOR)
    for iy in range(math.floor(y_min), math.ceil(y_max)):
        draw_hline(canvas, view.to_screen(view.cx, float(iy))[1], GRID_COLOR)


def draw_circle(canvas: Canvas, view: View) -> None:
    """Draw a circle about the world origin, a quarter of the smaller half-extent in radius."""
    _, x_max, _, y_max = view.bounds()
    r = min(x_max, y_max) * 0.25
    t = 0.0
    while t < 2 * math.pi:
        sx, sy = view.to_screen(r * math.cos(t), r * math.sin(t))
        canvas.put_pixel(sx, sy, CIRCLE_COLOR)
        t += CIRCLE_STEP


def draw_dot(canvas: Canvas, x: int, y: int, color: int) -> None:
    """Draw a small disk of radius 2 centred on pixel (*x*, *y*)."""
    for dy in range(-2, 3):
        for dx in range(-2, 3):
            if dx * dx + dy * dy <= 4:
                canvas.put_pixel(x + dx, y + dy, color)


def render(canvas: Canvas, view: View) -> Canvas:
    """Clear to white, then draw the grid and the circle; return the canvas."""
    canvas.clear(BACKGROUND)
    draw_grid(canvas, view)
    draw_circle(canvas, view)
    return canvas


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the zoom demo window; the mouse wheel zooms, Escape quits."""
    parser = argparse.ArgumentParser(
        prog="fractview-zoom",
        description="Zoom a world-coordinate grid with the mouse wheel.",
    )
    parser.parse_args(argv)
    view = View()
    canvas = Canvas(view.width, view.height)
    render(canvas, view)

    def on_mouse(button: int, x: int, y: int) -> None:
        print(f"button:{button}\tx:{x}\ty:{y}")
        if button == SCROLL_UP:
            view.zoom(x, y, True)
        if button == SCROLL_DOWN:
            view.zoom(x, y, False)
        render(canvas, view)

    _run_window("fractview zoom", canvas, on_mouse, lambda code: code == ESC)
    return 0


if __name__ == "__main__":
    sys.exit(main())