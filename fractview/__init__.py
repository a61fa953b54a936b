"""Mandelbrot and Julia set viewer, zoom demo, drawing sketches and small helpers."""

__version__ = "0.1.0"