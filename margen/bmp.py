"""Writing uncompressed bottom-up BMP files row by row."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable

HEADER_SIZE = 54
_DIB_HEADER_SIZE = 40
_PRINT_RESOLUTION = 2835
_HEADER = struct.Struct("<2sIIIIIIHHIIIIII")
_MASK32 = 0xFFFFFFFF


def bmp_header(width: int, height: int, color_depth: int) -> bytes:
    """Return the 54-byte file and info header for an image of the given size."""
    data_length = (width * height * color_depth) & _MASK32
    return _HEADER.pack(
        b"BM",
        (HEADER_SIZE + data_length) & _MASK32,
        0,
        HEADER_SIZE,
        _DIB_HEADER_SIZE,
        width,
        height,
        1,
        color_depth * 8,
        0,
        data_length,
        _PRINT_RESOLUTION,
        _PRINT_RESOLUTION,
        0,
        0,
    )


def line_length(width: int, color_depth: int) -> int:
    """Return the byte length of one stored row, padded to a multiple of four."""
    data_length = width * color_depth
    offset = data_length % 4
    return data_length + (4 - offset if offset else 0)


def pad_line(data: bytes, width: int, color_depth: int) -> bytes:
    """Return the first ``width * color_depth`` bytes of ``data`` with row padding."""
    data_length = width * color_depth
    if len(data) < data_length:
        raise ValueError(f"row holds {len(data)} bytes, expected {data_length}")
    return bytes(data[:data_length]).ljust(line_length(width, color_depth), b"\0")


def write_bmp(
    path: str | os.PathLike[str],
    width: int,
    height: int,
    color_depth: int,
    descending: bool,
    lines: Iterable[bytes],
) -> None:
    """Write ``height`` rows from ``lines`` to ``path`` as a BMP file.

    Rows are stored in the order given, or in reverse order when ``descending``.
    """
    stride = line_length(width, color_depth)
    rows = iter(lines)
    with open(path, "wb") as fh:
        fh.write(bmp_header(width, height, color_depth))
        for y in range(height):
            try:
                row = next(rows)
            except StopIteration:
                raise ValueError(f"expected {height} rows, got {y}") from None
            if descending:
                fh.seek(HEADER_SIZE + (height - y - 1) * stride)
            fh.write(pad_line(row, width, color_depth))