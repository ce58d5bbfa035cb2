import pytest

from imgsort.image import PixelBuffer


def make_buffer(rows):
    """Build a PixelBuffer from a list of rows of (r, g, b) tuples."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    data = bytearray()
    for row in rows:
        for pixel in row:
            data += bytes(pixel)
    return PixelBuffer(width, height, data)


@pytest.fixture
def gradient():
    rows = []
    for y in range(5):
        rows.append([((x * 40 + y * 7) % 256, (y * 53) % 256, (x * y * 11) % 256) for x in range(3)])
    return make_buffer(rows)
