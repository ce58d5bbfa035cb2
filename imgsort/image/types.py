from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

BYTES_PER_PIXEL = 3

Rgb = Tuple[int, int, int]


@dataclass
class PixelBuffer:
    """Row-major RGB pixel buffer, row 0 first, 3 bytes per pixel.

    Leaving ``pixels`` empty for a non-empty size zero-fills the buffer.
    """

    width: int = 0
    height: int = 0
    pixels: bytearray = field(default_factory=bytearray, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Width and height must not be negative")
        expected = BYTES_PER_PIXEL * self.width * self.height
        if not self.pixels:
            self.pixels = bytearray(expected)
            return
        self.pixels = bytearray(self.pixels)
        if len(self.pixels) != expected:
            raise ValueError(
                f"Pixel data must be {expected} bytes for {self.width}x{self.height}, got {len(self.pixels)}"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def row_size(self) -> int:
        """Return the number of pixel bytes in a single row."""
        return BYTES_PER_PIXEL * self.width

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) out of range for {self.width}x{self.height}")
        return (y * self.width + x) * BYTES_PER_PIXEL

    def pixel(self, x: int, y: int) -> Rgb:
        i = self._offset(x, y)
        r, g, b = self.pixels[i : i + BYTES_PER_PIXEL]
        return r, g, b

    def set_pixel(self, x: int, y: int, rgb: Iterable[int]) -> None:
        i = self._offset(x, y)
        self.pixels[i : i + BYTES_PER_PIXEL] = bytes(rgb)

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range for height {self.height}")
        start = y * self.row_size
        return bytes(self.pixels[start : start + self.row_size])

    def column(self, x: int) -> List[Rgb]:
        return [self.pixel(x, y) for y in range(self.height)]

    def set_column(self, x: int, values: List[Rgb]) -> None:
        if len(values) != self.height:
            raise ValueError(f"Column needs {self.height} pixels, got {len(values)}")
        for y, rgb in enumerate(values):
            self.set_pixel(x, y, rgb)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, bytearray(self.pixels))
