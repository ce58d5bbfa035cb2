from __future__ import annotations

from typing import Optional


class BitmapError(Exception):
    """Base class for all bitmap read/write failures."""

    message = "Bitmap error"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        text = self.message if not detail else f"{self.message}: {detail}"
        super().__init__(text)


class ReadError(BitmapError):
    message = "Error reading input file"


class WriteError(BitmapError):
    message = "Error writing output file"


class CorruptFile(BitmapError):
    message = "Input file is corrupt or incomplete"


class UnsupportedFormat(BitmapError):
    message = "Input file has unsupported format"
