# fractview

A small interactive viewer for the Mandelbrot set and Julia sets. It opens a
700×700 window drawn with pygame. You zoom with the mouse wheel, and the zoom
keeps the point under the cursor in place.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Usage

Show the Mandelbrot set:

    fractview M

Show a Julia set. The two values are the real and imaginary parts of the
constant `c`. Each must be a plain decimal such as `0.285` or `-1.5`, and each
must lie between -2.0 and 2.0:

    fractview J 0.285 0.01

The view starts at 40 iterations. Scrolling up zooms in and adds four
iterations. Scrolling down zooms out and removes four. Every mouse button
press is printed to standard output as `button:<n>	x:<x>	y:<y>`. Press
Escape or close the window to quit.

Points that never escape are drawn black. Points that escape are drawn in one
of two reds, depending on whether the escape count is even or odd.

If the arguments are wrong, the program prints a usage summary and exits with
status 1.

A second command opens a demo of world coordinates and zooming. It draws a
grey grid at whole-number coordinates and a dark red circle around the origin
in a 720×480 window. The wheel zooms around the cursor and Escape quits:

    fractview-zoomdemo

## Library use

The pieces behind the viewer can be used without opening a window:

- `fractview.args.parse_args` turns a list of arguments into a
  `FractalSpec`. It raises `InvalidArgumentsError` when the arguments are
  invalid. `usage_text` returns the usage summary.
- `fractview.fractal.Camera` maps pixels to the complex plane. `Camera.zoom`
  zooms around a pixel, and `Camera.bounds` gives the visible area.
- `fractview.fractal.mandelbrot_escape` and `fractview.fractal.julia_escape`
  return the escape count for one pixel. `fractview.fractal.pixel_color`
  turns that count into a colour.
- `fractview.canvas.Canvas` is an in-memory buffer of 32-bit pixels.
  `fractview.app.draw_fractal` fills a canvas with a fractal, and
  `fractview.app.Session` holds the viewer's state and its reactions to mouse
  and key input.
- `fractview.zoomdemo.View` is the camera of the zoom demo, and
  `fractview.zoomdemo.render` draws the grid and circle onto a canvas.
- `fractview.sketches` draws a few small pictures onto a canvas: a circle
  outline, a filled circle, the orbit of 0 under z·z + c
  (`julia_orbit`, `draw_julia_orbit`), and a pixel that bounces around the
  canvas (`billiard_position`, `billiard_frames`).
- `fractview.strings`, `fractview.chars`, `fractview.memory` and
  `fractview.printf` hold small string, character, byte-buffer and
  formatting helpers. `fractview.linkedlist.LinkedList` is a singly linked
  list.

## Limitations

- The sketches in `fractview.sketches` have no command of their own. They
  only draw onto a `Canvas`, and nothing shows them in a window.
- The viewer cannot save images. The canvas can be read back with
  `Canvas.to_bytes`, but writing it to a file is left to the caller.