"""An in-memory 32-bit pixel image."""

import struct

_PIXEL = struct.Struct("<I")


class Canvas:
    """A width x height image of 32-bit little-endian pixels (0x00RRGGBB)."""

    bytes_per_pixel = 4

    def __init__(self, width: int = 700, height: int = 700) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * self.bytes_per_pixel)

    @property
    def line_length(self) -> int:
        """Bytes per row."""
        return self.width * self.bytes_per_pixel

    def _offset(self, x: int, y: int) -> int:
        return y * self.line_length + x * self.bytes_per_pixel

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set pixel (*x*, *y*); points outside the canvas are ignored."""
        if self._inside(x, y):
            _PIXEL.pack_into(self._data, self._offset(x, y), color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return pixel (*x*, *y*); raise IndexError outside the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return _PIXEL.unpack_from(self._data, self._offset(x, y))[0]

    def clear(self, color: int) -> None:
        """Fill the whole canvas with *color*."""
        self._data[:] = _PIXEL.pack(color & 0xFFFFFFFF) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the raw pixel data, row by row."""
        return bytes(self._data)