"""PCG32 pseudo-random number generator."""

from __future__ import annotations

import struct
import threading

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MULTIPLIER = 6364136223846793005
_SEED_XOR = 0x853C49E6748FEA9B
_SEQUENCE_START = 0xDA3E39CB94B95BDB
_SEQUENCE_STEP = 0x9E3779B97F4A7C15


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class PcgRandom:
    """PCG32 generator; each instance draws its own stream increment."""

    _sequence = _SEQUENCE_START
    _lock = threading.Lock()

    def __init__(self, seed: int) -> None:
        with PcgRandom._lock:
            sequence = PcgRandom._sequence
            PcgRandom._sequence = (sequence + _SEQUENCE_STEP) & _MASK64
        self.inc = sequence | 1
        state = ((seed & _MASK64) ^ _SEED_XOR) + self.inc
        self.state = (state * _MULTIPLIER + self.inc) & _MASK64

    def next_u32(self) -> int:
        """Return the next 32-bit output."""
        old = self.state
        self.state = (old * _MULTIPLIER + self.inc) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def randint(self, bound: int) -> int:
        """Return an integer in [0, bound), or 0 when bound is 0."""
        if not 0 <= bound <= _MASK32:
            raise ValueError("bound must fit in an unsigned 32-bit integer")
        return (self.next_u32() * bound) >> 32

    def uniform(self, bound: float) -> float:
        """Return a single-precision float in [0, bound]."""
        bound32 = _f32(bound)
        numerator = _f32(_f32(float(self.next_u32() >> 1)) * bound32)
        return _f32(numerator / _f32(2147483647.0))