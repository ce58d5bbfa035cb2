from .bmp import (
    BitmapError,
    CorruptFile,
    ReadError,
    UnsupportedFormat,
    WriteError,
    decode_stream,
    encode_stream,
    load_image,
    save_image,
)
from .image import PixelBuffer
from .settings import AppSettings, CodecSettings
from .transform import brightness, sort_columns

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "BitmapError",
    "brightness",
    "CodecSettings",
    "CorruptFile",
    "decode_stream",
    "encode_stream",
    "load_image",
    "PixelBuffer",
    "ReadError",
    "save_image",
    "sort_columns",
    "UnsupportedFormat",
    "WriteError",
]
