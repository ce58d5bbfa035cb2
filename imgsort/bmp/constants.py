from __future__ import annotations

IDENTIFIER = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE

NUM_COLOR_PLANES = 1
BITS_PER_PIXEL = 24
COMPRESSION_NONE = 0
COLOR_PALETTE_SIZE = 0
NUM_IMPORTANT_COLORS = 0

# 3780 pixels per meter is roughly 96 DPI
DEFAULT_RESOLUTION = 3780

ROW_ALIGNMENT = 4


def padded_row_size(row_size: int) -> int:
    """Round a row length in bytes up to the 4-byte boundary used on disk."""
    return ((row_size + ROW_ALIGNMENT - 1) // ROW_ALIGNMENT) * ROW_ALIGNMENT
