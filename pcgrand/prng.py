"""PCG32: 64-bit LCG state with the XSH-RR 32-bit output permutation."""

import logging
from dataclasses import dataclass
from typing import List, MutableSequence

from . import sampling
from .bits import MASK32, MASK64, lcg_advance, rotr32

logger = logging.getLogger(__name__)

MULTIPLIER = 0x5851F42D4C957F2D
DEFAULT_STATE = 0x853C49E6748FEA9B
DEFAULT_INCREMENT = 0xDA3E39CB94B95BDB


@dataclass
class PCG32:
    """Base generator. ``increment`` selects the stream and is always odd."""

    state: int = DEFAULT_STATE
    increment: int = DEFAULT_INCREMENT

    def __post_init__(self) -> None:
        self.state &= MASK64
        self.increment = (self.increment & MASK64) | 1

    def seed(self, seed: int, sequence: int = 0) -> "PCG32":
        """Reseed in place and return ``self`` so calls can be chained."""
        self.increment = ((sequence << 1) | 1) & MASK64
        self.state = ((seed + self.increment) * MULTIPLIER + self.increment) & MASK64
        logger.debug("pcg32 seeded: seed=%#x sequence=%#x", seed & MASK64, sequence & MASK64)
        return self

    def next_u32(self) -> int:
        old = self.state
        self.state = (old * MULTIPLIER + self.increment) & MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return rotr32(xorshifted, rot)

    def random(self) -> float:
        return self.next_u32() / 2**32

    def bounded(self, bound: int) -> int:
        """Uniform value in ``[0, bound)``; ``0`` when ``bound`` is zero."""
        return sampling.bounded(self.next_u32, bound, MASK32)

    def advance(self, delta: int) -> "PCG32":
        """Jump forward ``delta`` steps (mod 2^64) in O(log delta)."""
        self.state = lcg_advance(self.state, delta, MULTIPLIER, self.increment)
        logger.debug("pcg32 advanced by %d", delta & MASK64)
        return self

    def retreat(self, delta: int) -> "PCG32":
        # Advancing by the additive inverse walks the full-period cycle backwards.
        return self.advance(-delta & MASK64)

    def shuffle(self, n: int, swap) -> None:
        sampling.shuffle(n, swap, self.bounded)

    def permutation(self, n: int) -> List[int]:
        return sampling.permutation(n, self.bounded)

    def fill_bytes(self, buffer: MutableSequence[int]) -> int:
        return sampling.fill_bytes(buffer, self.next_u32, 4)
