"""The interactive fractal viewer: drawing, input handling and the window loop."""

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

from fractview.args import (
    FractalSpec,
    FractalType,
    InvalidArgumentsError,
    parse_args,
    usage_text,
)
from fractview.canvas import Canvas
from fractview.fractal import (
    DEFAULT_ITER,
    Camera,
    julia_escape,
    mandelbrot_escape,
    pixel_color,
)

ESC = 0xFF1B
SCROLL_UP = 4
SCROLL_DOWN = 5
ITER_STEP = 4
TITLE = "fractview"


def draw_fractal(canvas: Canvas, camera: Camera, spec: FractalSpec, max_iter: int) -> Canvas:
    """Colour every pixel of *canvas* by its escape count and return the canvas."""
    if spec.kind is FractalType.JULIA:
        c = spec.c

        def escape(x: int, y: int) -> int:
            return julia_escape(camera, x, y, c, max_iter)
    else:

        def escape(x: int, y: int) -> int:
            return mandelbrot_escape(camera, x, y, max_iter)

    for y in range(canvas.height):
        for x in range(canvas.width):
            canvas.put_pixel(x, y, pixel_color(escape(x, y), max_iter))
    return canvas


@dataclass
class Session:
    """The state of one viewer window and its reactions to input."""

    spec: FractalSpec
    camera: Camera = field(default_factory=Camera)
    canvas: Canvas = field(default_factory=Canvas)
    max_iter: int = DEFAULT_ITER
    out: Optional[TextIO] = None
    running: bool = True

    def on_mouse(self, button: int, x: int, y: int) -> Canvas:
        """Zoom on the wheel, adjust the iteration limit and redraw."""
        print(f"button:{button}\tx:{x}\ty:{y}", file=self.out or sys.stdout)
        if button == SCROLL_UP:
            self.camera.zoom(x, y, True)
            self.max_iter += ITER_STEP
        if button == SCROLL_DOWN:
            self.camera.zoom(x, y, False)
            self.max_iter -= ITER_STEP
        return self.render()

    def on_key(self, keycode: int) -> bool:
        """Handle a key; return True when it closes the window (Escape)."""
        if keycode == ESC:
            self.running = False
            return True
        return False

    def render(self) -> Canvas:
        """Redraw the fractal onto the canvas and return it."""
        return draw_fractal(self.canvas, self.camera, self.spec, self.max_iter)


def _rgb_bytes(canvas: Canvas) -> bytes:
    data = canvas.to_bytes()
    rgb = bytearray(len(data) // 4 * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def _present(pygame, screen, canvas: Canvas) -> None:
    surface = pygame.image.frombuffer(_rgb_bytes(canvas), (canvas.width, canvas.height), "RGB")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def _run_window(
    title: str,
    canvas: Canvas,
    on_mouse: Callable[[int, int, int], object],
    on_key: Callable[[int], bool],
) -> None:
    """Show *canvas* in a window and dispatch input until it is closed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(title)
        _present(pygame, screen, canvas)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                code = ESC if event.key == pygame.K_ESCAPE else event.key
                if on_key(code):
                    return
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                on_mouse(event.button, x, y)
                _present(pygame, screen, canvas)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; print the usage and return 1 for bad arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        spec = parse_args(args)
    except InvalidArgumentsError:
        sys.stdout.write(usage_text())
        return 1
    session = Session(spec)
    session.render()
    _run_window(TITLE, session.canvas, session.on_mouse, session.on_key)
    return 0


if __name__ == "__main__":
    sys.exit(main())