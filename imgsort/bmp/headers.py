from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    BITS_PER_PIXEL,
    COLOR_PALETTE_SIZE,
    COMPRESSION_NONE,
    DATA_OFFSET,
    DEFAULT_RESOLUTION,
    FILE_HEADER_SIZE,
    IDENTIFIER,
    INFO_HEADER_SIZE,
    NUM_COLOR_PLANES,
    NUM_IMPORTANT_COLORS,
)
from .errors import UnsupportedFormat


def _field(data: bytes, offset: int, size: int, signed: bool = False) -> int:
    return int.from_bytes(data[offset : offset + size], "little", signed=signed)


def _pack(value: int, size: int, signed: bool = False) -> bytes:
    return value.to_bytes(size, "little", signed=signed)


@dataclass(frozen=True)
class FileHeader:
    """The 14-byte bitmap file header."""

    file_size: int = 0
    data_offset: int = DATA_OFFSET

    def pack(self) -> bytes:
        """Serialize the header, reserved bytes written as zero."""
        return b"".join(
            [
                IDENTIFIER,
                _pack(self.file_size, 4),
                _pack(0, 4),
                _pack(self.data_offset, 4),
            ]
        )

    @staticmethod
    def check_identifier(ident: bytes) -> None:
        if ident != IDENTIFIER:
            raise UnsupportedFormat(f"bad identifier {ident!r}")

    @classmethod
    def unpack(cls, data: bytes) -> "FileHeader":
        """Parse a file header; the 4 reserved bytes at offset 6 are ignored."""
        if len(data) != FILE_HEADER_SIZE:
            raise ValueError(f"File header must be {FILE_HEADER_SIZE} bytes")
        cls.check_identifier(bytes(data[0:2]))
        return cls(file_size=_field(data, 2, 4), data_offset=_field(data, 10, 4))


@dataclass(frozen=True)
class InfoHeader:
    """The 40-byte BITMAPINFOHEADER, restricted to uncompressed 24 bpp."""

    width: int = 0
    height: int = 0
    image_size: int = 0
    res_horz: int = DEFAULT_RESOLUTION
    res_vert: int = DEFAULT_RESOLUTION
    important_colors: int = NUM_IMPORTANT_COLORS

    def pack(self) -> bytes:
        return b"".join(
            [
                _pack(INFO_HEADER_SIZE, 4),
                _pack(self.width, 4, signed=True),
                _pack(self.height, 4, signed=True),
                _pack(NUM_COLOR_PLANES, 2),
                _pack(BITS_PER_PIXEL, 2),
                _pack(COMPRESSION_NONE, 4),
                _pack(self.image_size, 4),
                _pack(self.res_horz, 4, signed=True),
                _pack(self.res_vert, 4, signed=True),
                _pack(COLOR_PALETTE_SIZE, 4),
                _pack(self.important_colors, 4),
            ]
        )

    @classmethod
    def unpack(cls, data: bytes) -> "InfoHeader":
        """Parse and validate an info header against the supported subset."""
        if len(data) != INFO_HEADER_SIZE:
            raise ValueError(f"Info header must be {INFO_HEADER_SIZE} bytes")
        size = _field(data, 0, 4)
        if size != INFO_HEADER_SIZE:
            raise UnsupportedFormat(f"info header size {size}")
        planes = _field(data, 12, 2)
        if planes != NUM_COLOR_PLANES:
            raise UnsupportedFormat(f"{planes} color planes")
        bpp = _field(data, 14, 2)
        if bpp != BITS_PER_PIXEL:
            raise UnsupportedFormat(f"{bpp} bits per pixel")
        compression = _field(data, 16, 4)
        if compression != COMPRESSION_NONE:
            raise UnsupportedFormat(f"compression method {compression}")
        palette = _field(data, 32, 4)
        if palette != COLOR_PALETTE_SIZE:
            raise UnsupportedFormat(f"color palette of {palette} entries")
        return cls(
            width=_field(data, 4, 4, signed=True),
            height=_field(data, 8, 4, signed=True),
            image_size=_field(data, 20, 4),
            res_horz=_field(data, 24, 4, signed=True),
            res_vert=_field(data, 28, 4, signed=True),
            important_colors=_field(data, 36, 4),
        )
