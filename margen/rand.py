"""Small deterministic pseudo-random generator (permuted multiplicative congruential)."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_DEFAULT_STATE = 0xCAFEF00DD15EA5E5
_MULTIPLIER = 6364136223846793005


class Random:
    """Seedable generator producing the same sequence for the same seed."""

    def __init__(self, seed: int | None = None) -> None:
        self._state = _DEFAULT_STATE
        if seed is not None:
            self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator from ``seed`` and discard the first output."""
        self._state = (2 * seed + 1) & _MASK64
        self.next()

    def next(self) -> int:
        """Return the next raw value (at most 42 bits wide)."""
        x = self._state
        count = x >> 61
        self._state = (x * _MULTIPLIER) & _MASK64
        x ^= x >> 22
        return x >> (22 + count)

    def uchar(self, maximum: int) -> int:
        """Return a value in ``[0, maximum)`` truncated to a byte; 0 when maximum is 0."""
        if maximum == 0:
            return 0
        return (self.next() % maximum) & 0xFF

    def ushort(self, maximum: int) -> int:
        """Return a value in ``[0, maximum)`` truncated to 16 bits; 0 when maximum is 0."""
        if maximum == 0:
            return 0
        return (self.next() % maximum) & 0xFFFF