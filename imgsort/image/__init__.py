from .types import BYTES_PER_PIXEL, PixelBuffer, Rgb

__all__ = ["BYTES_PER_PIXEL", "PixelBuffer", "Rgb"]
