"""Loading of uncompressed BMP images into RGBA pixel data."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]

_HEADER_SIZE = 54


class ImageFormatError(RuntimeError):
    """Raised when an image file is malformed or of an unsupported format."""


@dataclass(frozen=True)
class ImageData:
    """Decoded image: rows run top to bottom, each pixel has ``channels`` bytes."""

    width: int = 0
    height: int = 0
    channels: int = 0
    pixels: bytes = b""


def load_image(path: PathLike) -> ImageData:
    """Load an image, choosing the decoder from the file extension."""
    suffix = Path(path).suffix
    if suffix == ".bmp":
        return load_bmp(path)
    if suffix == ".png":
        raise ImageFormatError(f"PNG images are not supported: {path}")
    raise ImageFormatError(f"Unsupported file format: {path}")


def load_bmp(path: PathLike) -> ImageData:
    """Load a 24- or 32-bit BMP file; 24-bit images gain an opaque alpha channel.

    Channel order is kept as stored in the file.
    """
    data = Path(path).read_bytes()
    if len(data) < _HEADER_SIZE or data[:2] != b"BM":
        raise ImageFormatError(f"Invalid BMP file: {path}")

    (offset,) = struct.unpack_from("<i", data, 10)
    width, height = struct.unpack_from("<ii", data, 18)
    (bits_per_pixel,) = struct.unpack_from("<h", data, 28)

    if bits_per_pixel not in (24, 32):
        raise ImageFormatError(f"Unsupported BMP bit depth: {path}")
    if width <= 0 or height <= 0:
        raise ImageFormatError(f"Invalid BMP dimensions: {path}")

    channels = bits_per_pixel // 8
    row_size = width * channels
    stride = row_size + (-row_size) % 4

    rows = []
    for start in range(offset, offset + height * stride, stride):
        row = data[start:start + row_size]
        if len(row) != row_size:
            raise ImageFormatError(f"Truncated BMP pixel data: {path}")
        rows.append(row)
    # Rows are stored bottom to top.
    rows.reverse()
    pixels = b"".join(rows)

    if channels == 3:
        rgba = bytearray(b"\xff" * (width * height * 4))
        for channel in range(3):
            rgba[channel::4] = pixels[channel::3]
        pixels = bytes(rgba)

    return ImageData(width, height, 4, pixels)