from __future__ import annotations

from PIL import Image

from ..image.types import PixelBuffer


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    """Build an RGB Pillow image with buffer row 0 at the top."""
    return Image.frombytes("RGB", buffer.size, bytes(buffer.pixels))


def image_to_buffer(img: Image.Image) -> PixelBuffer:
    if img.mode != "RGB":
        img = img.convert("RGB")
    return PixelBuffer(img.width, img.height, bytearray(img.tobytes()))
