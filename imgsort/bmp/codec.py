from __future__ import annotations

import io
import logging
import os
import tempfile
from typing import BinaryIO, Optional, Tuple

from ..image.types import PixelBuffer
from ..settings import CodecSettings
from .constants import DATA_OFFSET, FILE_HEADER_SIZE, INFO_HEADER_SIZE, padded_row_size
from .errors import CorruptFile, ReadError, UnsupportedFormat, WriteError
from .headers import FileHeader, InfoHeader

logger = logging.getLogger(__name__)

MIN_RESOLUTION = -(2**31)
MAX_DIMENSION = 2**31 - 1
MAX_FILE_SIZE = 2**32 - 1


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    try:
        data = stream.read(size)
    except OSError as exc:
        raise CorruptFile(f"read failed in {what}") from exc
    if data is None or len(data) != size:
        raise CorruptFile(f"unexpected end of file in {what}")
    return data


def _swap_red_blue(row: bytes) -> bytearray:
    """Swap the first and third byte of every triple (RGB <-> BGR)."""
    out = bytearray(row)
    out[0::3] = row[2::3]
    out[2::3] = row[0::3]
    return out


def _remaining(stream: BinaryIO) -> int:
    """Return the number of bytes between the current position and the end."""
    try:
        position = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(position)
    except (OSError, ValueError) as exc:
        raise CorruptFile("cannot determine length of pixel data") from exc
    return end - position


def read_headers(stream: BinaryIO) -> Tuple[FileHeader, InfoHeader]:
    """Read and validate both headers, leaving the stream after the info header."""
    ident = _read_exact(stream, 2, "file header")
    FileHeader.check_identifier(ident)
    file_header = FileHeader.unpack(ident + _read_exact(stream, FILE_HEADER_SIZE - 2, "file header"))
    info_header = InfoHeader.unpack(_read_exact(stream, INFO_HEADER_SIZE, "info header"))
    logger.debug(
        "bitmap header: %dx%d, data offset %d, image size %d, resolution %dx%d",
        info_header.width,
        info_header.height,
        file_header.data_offset,
        info_header.image_size,
        info_header.res_horz,
        info_header.res_vert,
    )
    return file_header, info_header


def decode_stream(stream: BinaryIO) -> PixelBuffer:
    """Decode an uncompressed 24 bpp bitmap into a PixelBuffer.

    Rows are taken in file order: row 0 of the buffer is the first row stored
    after the data offset. No bottom-up inversion is applied.
    """
    file_header, info_header = read_headers(stream)
    width, height = info_header.width, info_header.height
    if width < 0 or height < 0:
        raise UnsupportedFormat(f"negative dimensions {width}x{height}")

    try:
        stream.seek(file_header.data_offset)
    except (OSError, ValueError) as exc:
        raise CorruptFile(f"cannot seek to pixel data at {file_header.data_offset}") from exc

    row_size = 3 * width
    padding = padded_row_size(row_size) - row_size
    if height:
        # trailing padding of the last row is not required
        needed = (row_size + padding) * (height - 1) + row_size
        available = _remaining(stream)
        if available < needed:
            raise CorruptFile(f"pixel data needs {needed} bytes, {available} left")
    if not row_size:
        return PixelBuffer(0, height)

    pixels = bytearray()
    for y in range(height):
        pixels += _swap_red_blue(_read_exact(stream, row_size, f"pixel row {y}"))
        if not padding:
            continue
        if y + 1 < height:
            _read_exact(stream, padding, f"padding of row {y}")
        else:
            # trailing padding of the last row may be missing
            try:
                stream.read(padding)
            except OSError as exc:
                raise CorruptFile(f"read failed in padding of row {y}") from exc
    return PixelBuffer(width, height, pixels)


def encode_stream(buffer: PixelBuffer, stream: BinaryIO, settings: Optional[CodecSettings] = None) -> None:
    """Write ``buffer`` as a 24 bpp bitmap, rows in buffer order."""
    settings = settings or CodecSettings()
    if buffer.width > MAX_DIMENSION or buffer.height > MAX_DIMENSION:
        raise ValueError(f"Image {buffer.width}x{buffer.height} exceeds bitmap dimension limits")
    for resolution in (settings.resolution_horz, settings.resolution_vert):
        if not MIN_RESOLUTION <= resolution <= MAX_DIMENSION:
            raise ValueError(f"Resolution {resolution} does not fit the bitmap header")
    row_size = buffer.row_size
    padded = padded_row_size(row_size)
    image_size = padded * buffer.height
    if DATA_OFFSET + image_size > MAX_FILE_SIZE:
        raise ValueError("Image is too large for the bitmap file size field")

    file_header = FileHeader(file_size=DATA_OFFSET + image_size, data_offset=DATA_OFFSET)
    info_header = InfoHeader(
        width=buffer.width,
        height=buffer.height,
        image_size=image_size,
        res_horz=settings.resolution_horz,
        res_vert=settings.resolution_vert,
    )
    padding = bytes(padded - row_size)
    try:
        stream.write(file_header.pack())
        stream.write(info_header.pack())
        for y in range(buffer.height):
            start = y * row_size
            stream.write(_swap_red_blue(buffer.pixels[start : start + row_size]))
            stream.write(padding)
        stream.flush()
    except OSError as exc:
        raise WriteError(str(exc)) from exc


def decode_bytes(data: bytes) -> PixelBuffer:
    return decode_stream(io.BytesIO(data))


def encode_bytes(buffer: PixelBuffer, settings: Optional[CodecSettings] = None) -> bytes:
    out = io.BytesIO()
    encode_stream(buffer, out, settings)
    return out.getvalue()


def _open_input(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise ReadError(f"{path}: {exc.strerror or exc}") from exc


def load_image(path: str) -> PixelBuffer:
    """Read a bitmap file from ``path``."""
    with _open_input(path) as handle:
        buffer = decode_stream(handle)
    logger.debug("loaded %s (%dx%d)", path, buffer.width, buffer.height)
    return buffer


def read_image_info(path: str) -> Tuple[FileHeader, InfoHeader]:
    """Read only the headers of the bitmap at ``path``."""
    with _open_input(path) as handle:
        return read_headers(handle)


def _write_in_place(path: str, buffer: PixelBuffer, settings: CodecSettings) -> None:
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise WriteError(f"{path}: {exc.strerror or exc}") from exc
    try:
        with handle:
            encode_stream(buffer, handle, settings)
    except OSError as exc:
        raise WriteError(f"{path}: {exc}") from exc


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def save_image(path: str, buffer: PixelBuffer, settings: Optional[CodecSettings] = None) -> None:
    """Write ``buffer`` to ``path`` as a bitmap.

    With ``settings.atomic`` (the default) the data goes to a temporary file in
    the destination directory which replaces ``path`` only once it is complete.
    """
    settings = settings or CodecSettings()
    if not settings.atomic:
        _write_in_place(path, buffer, settings)
        return

    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, temp_path = tempfile.mkstemp(prefix=".imgsort-", suffix=".bmp", dir=directory)
    except OSError as exc:
        raise WriteError(f"{path}: {exc.strerror or exc}") from exc
    done = False
    try:
        try:
            with os.fdopen(fd, "wb") as handle:
                encode_stream(buffer, handle, settings)
            os.chmod(temp_path, 0o666 & ~_current_umask())
            os.replace(temp_path, path)
        except OSError as exc:
            raise WriteError(f"{path}: {exc}") from exc
        done = True
    finally:
        if not done and os.path.exists(temp_path):
            os.remove(temp_path)
    logger.debug("saved %s (%dx%d)", path, buffer.width, buffer.height)
