"""Marble pattern generation."""

from __future__ import annotations

import struct
import sys
import time
from collections.abc import Iterator
from typing import TextIO

from .bmp import write_bmp
from .params import BANNER, Parameters
from .rand import Random

BMP_COLOR_DEPTH = 3
_FLOAT = struct.Struct("f")


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return _FLOAT.unpack(_FLOAT.pack(value))[0]


class Generator:
    """Produces the rows of one marble image, top to bottom."""

    def __init__(self, params: Parameters) -> None:
        self.params = params
        self._depth = 1 if params.monochrome else 3
        self._slope = _f32(params.slope / 255.0)
        self._top_weight = 1.0 - self._slope
        columns = params.width // params.size + 1
        self._row = [params.start[i % self._depth] for i in range(columns * self._depth)]
        self._rng = Random(params.seed)
        self._line: bytes | None = None

    def _pixel(self, channel: int, top: int, left: int) -> int:
        k = self._rng.uchar(self.params.var[channel] + 1)
        signed = k if self._rng.uchar(2) == 0 else -k
        value = int(_f32(signed + _f32(left * self._slope)) + top * self._top_weight)
        return min(max(value, 0), 255)

    def next_row(self) -> bytes:
        """Advance to a new row of coarse pixels and return its channel values."""
        depth = self._depth
        start = self.params.start
        row: list[int] = []
        for i, top in enumerate(self._row):
            left = start[i] if i < depth else row[i - depth]
            row.append(self._pixel(i % depth, top, left))
        self._row = row
        self._line = None
        return bytes(row)

    def _render(self) -> bytes:
        depth = self._depth
        size = self.params.size
        repeat = size if depth == BMP_COLOR_DEPTH else BMP_COLOR_DEPTH * size
        pixels = (
            bytes(self._row[i : i + depth]) for i in range(0, len(self._row), depth)
        )
        data = b"".join(pixel * repeat for pixel in pixels)
        data = data[: self.params.width * BMP_COLOR_DEPTH]
        if self.params.rotation // 2 != 1:
            data = data[::-1]
        return data

    def bmp_line(self, y: int) -> bytes:
        """Return the BGR bytes of image row ``y``; rows must be requested in order."""
        if y % self.params.size == 0:
            self.next_row()
        if self._line is None:
            self._line = self._render()
        return self._line

    def lines(self) -> Iterator[bytes]:
        """Yield every image row from the first to the last."""
        for y in range(self.params.height):
            yield self.bmp_line(y)


def generate(params: Parameters, out: TextIO | None = None) -> None:
    """Generate the image described by ``params`` and write it to its file."""
    out = sys.stdout if out is None else out
    if not params.quiet:
        print(BANNER, file=out)
    started = time.process_time()
    generator = Generator(params)
    if not params.quiet:
        out.write(params.describe())
    write_bmp(
        params.file_path,
        params.width,
        params.height,
        BMP_COLOR_DEPTH,
        params.rotation % 2 == 1,
        generator.lines(),
    )
    if not params.quiet:
        print(f"time: {time.process_time() - started:.3f}s", file=out)