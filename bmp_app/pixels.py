from __future__ import annotations

from typing import BinaryIO

import numpy as np

from .errors import PixelTransformError

FIXED_PADDING = 2
CHUNK_SIZE = 64 * 1024
STRIDE_MODES = ("fixed", "aligned")


def row_padding(width: int, stride: str = "fixed") -> int:
    if stride == "fixed":
        return FIXED_PADDING
    if stride == "aligned":
        return (4 - (3 * width) % 4) % 4
    raise ValueError(f"Unknown stride mode: {stride}")


def invert_bytes(data: bytes) -> bytes:
    # bitwise_not on uint8 is 255 - x
    return np.bitwise_not(np.frombuffer(data, dtype=np.uint8)).tobytes()


def _read(source: BinaryIO, size: int) -> bytes:
    try:
        return source.read(size)
    except OSError as exc:
        raise PixelTransformError(f"Error: failed to read pixel data: {exc}") from exc


def _write(destination: BinaryIO, data: bytes) -> None:
    try:
        destination.write(data)
    except OSError as exc:
        raise PixelTransformError(f"Error: failed to write pixel data: {exc}") from exc


def invert_pixels(
    source: BinaryIO,
    destination: BinaryIO,
    width: int,
    height: int,
    padding: int = FIXED_PADDING,
) -> None:
    """
    Streams `height` rows from source to destination.

    Each row is 3 * width color bytes, written inverted, followed by
    `padding` bytes copied as they are. Non-positive width or height means
    no color bytes or no rows. A short read raises PixelTransformError after
    whatever was read has been written.
    """
    row_bytes = max(0, 3 * width)
    if row_bytes == 0 and padding == 0:
        return
    for row in range(height):
        remaining = row_bytes
        # the declared width may be far larger than the file
        while remaining > 0:
            size = min(remaining, CHUNK_SIZE)
            pixels = _read(source, size)
            _write(destination, invert_bytes(pixels))
            if len(pixels) < size:
                raise PixelTransformError(f"Error: unexpected end of pixel data in row {row}")
            remaining -= size

        pad = _read(source, padding)
        _write(destination, pad)
        if len(pad) < padding:
            raise PixelTransformError(f"Error: unexpected end of padding in row {row}")


def copy_verbatim(source: BinaryIO, destination: BinaryIO, size: int) -> None:
    remaining = size
    while remaining > 0:
        chunk = _read(source, min(remaining, CHUNK_SIZE))
        _write(destination, chunk)
        if not chunk:
            raise PixelTransformError(f"Error: expected {size} leading bytes, got {size - remaining}")
        remaining -= len(chunk)
