from .codec import (
    decode_bytes,
    decode_stream,
    encode_bytes,
    encode_stream,
    load_image,
    read_headers,
    read_image_info,
    save_image,
)
from .errors import BitmapError, CorruptFile, ReadError, UnsupportedFormat, WriteError
from .headers import FileHeader, InfoHeader

__all__ = [
    "BitmapError",
    "CorruptFile",
    "decode_bytes",
    "decode_stream",
    "encode_bytes",
    "encode_stream",
    "FileHeader",
    "InfoHeader",
    "load_image",
    "read_headers",
    "read_image_info",
    "ReadError",
    "save_image",
    "UnsupportedFormat",
    "WriteError",
]
