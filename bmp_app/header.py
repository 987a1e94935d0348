from __future__ import annotations

from dataclasses import dataclass, fields
from typing import BinaryIO

import numpy as np

from .errors import HeaderDecodeError

HEADER_SIZE = 54
BMP_MAGIC = 0x424D  # b"BM" read most-significant byte first

# The tag is read most-significant byte first, every numeric field after it
# is little-endian.
HEADER_DTYPE = np.dtype([
    ("magic", ">u2"),
    ("file_size", "<u4"),
    ("reserved1", "<u2"),
    ("reserved2", "<u2"),
    ("pixel_data_offset", "<u4"),
    ("dib_header_size", "<u4"),
    ("width_px", "<i4"),
    ("height_px", "<i4"),
    ("color_planes", "<u2"),
    ("bits_per_pixel", "<u2"),
    ("compression", "<u4"),
    ("image_size_bytes", "<u4"),
    ("x_resolution_ppm", "<i4"),
    ("y_resolution_ppm", "<i4"),
    ("num_colors", "<u4"),
    ("important_colors", "<u4"),
])


@dataclass(frozen=True)
class BitmapHeader:
    magic: int
    file_size: int
    pixel_data_offset: int
    dib_header_size: int
    width_px: int
    height_px: int
    color_planes: int
    bits_per_pixel: int
    compression: int
    image_size_bytes: int
    x_resolution_ppm: int
    y_resolution_ppm: int
    num_colors: int
    important_colors: int


def decode_header(data: bytes) -> BitmapHeader:
    """
    Decodes the first 54 bytes of a bitmap file.

    No field is range-checked here; acceptance is left to validate_header().
    Raises HeaderDecodeError if fewer than 54 bytes are given.
    """
    if len(data) < HEADER_SIZE:
        raise HeaderDecodeError("Error: failed to read header")
    record = np.frombuffer(data, dtype=HEADER_DTYPE, count=1)[0]
    values = {field.name: int(record[field.name]) for field in fields(BitmapHeader)}
    return BitmapHeader(**values)


def read_header(stream: BinaryIO) -> tuple[BitmapHeader, bytes]:
    raw = stream.read(HEADER_SIZE)
    return decode_header(raw), raw


def format_header(header: BitmapHeader) -> str:
    widths = {"magic": 4, "color_planes": 4, "bits_per_pixel": 4}
    rule = "-" * 43
    lines = [rule, "BMP Header Data", rule]
    for field in fields(BitmapHeader):
        value = getattr(header, field.name)
        digits = widths.get(field.name, 8)
        # signed fields are shown as their two's complement bit pattern
        mask = (1 << (digits * 4)) - 1
        lines.append(f"{field.name + ':':<19}0x{value & mask:0{digits}x}")
    lines.append(rule)
    return "\n".join(lines)
