"""PCG32 (XSH RR 64/32) random number generator for battle mechanics."""

from __future__ import annotations

import time

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MULTIPLIER = 6364136223846793005

DEFAULT_STATE = 0x853C49E6748FEA9B
DEFAULT_INC = 0xDA3E39CB94B95BDB


def _entropy_seed() -> int:
    return time.time_ns() & _MASK32


class Pcg32:
    """A PCG32 generator with 64-bit state and 64-bit increment."""

    def __init__(self, seed: int | None = None) -> None:
        self.state = DEFAULT_STATE
        self.inc = DEFAULT_INC
        if seed is not None:
            self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reseed; a seed of 0 draws one from the system clock."""
        if not 0 <= seed <= _MASK32:
            raise ValueError(f"seed must be a 32-bit unsigned integer, got {seed}")
        if seed == 0:
            seed = _entropy_seed()
        self.state = 0
        self.inc = ((seed << 1) | 1) & _MASK64
        self.next_u32()
        self.state = (self.state + seed) & _MASK64
        self.next_u32()

    def next_u32(self) -> int:
        """Advance and return the next 32-bit output."""
        old = self.state
        self.state = (old * _MULTIPLIER + self.inc) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def below(self, maximum: int) -> int:
        """Return a number in [0, maximum); 0 when maximum is 0."""
        if not 0 <= maximum <= 0xFFFF:
            raise ValueError(f"maximum must be a 16-bit unsigned integer, got {maximum}")
        if maximum == 0:
            return 0
        return self.next_u32() % maximum


_generator = Pcg32()


def initialize(seed: int = 0) -> None:
    """Seed the shared generator; 0 uses clock entropy."""
    _generator.seed(seed)


def random(maximum: int) -> int:
    """Draw a number in [0, maximum) from the shared generator."""
    return _generator.below(maximum)