"""PCG64: two PCG32 halves viewed as independent streams or as one 128-bit LCG.

``next_u64`` is the fast path and concatenates one 32-bit draw from each half.
``next_u64_mcg`` is the quality path: ``(hi.state, lo.state)`` is stepped as a
single 128-bit LCG and ``hi`` is run through a multiply/xorshift permutation
keyed by ``lo``. Both paths share the same state, jumps and serialization, so
mixing them on one instance is allowed but makes the sequence depend on the
interleaving.
"""

import logging
from dataclasses import dataclass, field
from typing import List, MutableSequence, Tuple

from . import codec, sampling
from .bits import MASK63, MASK64, add64, mul64
from .prng import PCG32

logger = logging.getLogger(__name__)

# 128-bit LCG constants, split into 64-bit words.
MUL_HI = 2549297995355413924
MUL_LO = 4865540595714422341
INC_HI = 6364136223846793005
INC_LO = 1442695040888963407

CHEAP_MULTIPLIER = 0xDA942042E4DD58B5

_INV_52 = 1.0 / (1 << 52)
_INV_64 = 1.0 / (1 << 64)
_MASK56 = (1 << 56) - 1


def _default_hi() -> PCG32:
    # Same as PCG64.new(0, 0).seed(0, 0, 0, 0): the equal zero sequences
    # collide, so hi takes the complemented one.
    return PCG32().seed(0, MASK64)


def _default_lo() -> PCG32:
    return PCG32().seed(0, 0)


@dataclass
class PCG64:
    """Composite generator owning two distinct :class:`PCG32` halves.

    ``PCG64()`` is equivalent to ``PCG64.new(0, 0).seed(0, 0, 0, 0)``.
    """

    hi: PCG32 = field(default_factory=_default_hi)
    lo: PCG32 = field(default_factory=_default_lo)

    def __post_init__(self) -> None:
        if self.hi is self.lo:
            raise ValueError("PCG64 halves must be distinct PCG32 instances")

    @classmethod
    def new(cls, seed1: int = 0, seed2: int = 0) -> "PCG64":
        """Seed ``hi`` with ``(seed1, 0)`` and ``lo`` with ``(seed2, 0)``."""
        return cls(hi=PCG32().seed(seed1, 0), lo=PCG32().seed(seed2, 0))

    def seed(self, seed1: int, seed2: int, seq1: int, seq2: int) -> "PCG64":
        """Reseed both halves: ``lo`` from ``(seed1, seq1)``, ``hi`` from ``(seed2, seq2)``.

        When the sequences agree outside their top bit they would give both
        halves the same increment, so ``seq2`` is complemented first.
        """

        if seq1 & MASK63 == seq2 & MASK63:
            seq2 = ~seq2 & MASK64
        self.lo.seed(seed1, seq1)
        self.hi.seed(seed2, seq2)
        return self

    def state_words(self) -> Tuple[int, int]:
        return self.hi.state, self.lo.state

    # -- fast path -------------------------------------------------------

    def next_u64(self) -> int:
        return (self.hi.next_u32() << 32) | self.lo.next_u32()

    def next_u63(self) -> int:
        return self.next_u64() & MASK63

    def random(self) -> float:
        """Float in ``[0, 1)`` with 52 bits of precision."""
        return (self.next_u63() >> 11) * _INV_52

    def random_full(self) -> float:
        """Low 56 bits of a 64-bit draw scaled by ``2^-64``.

        The result lies in ``[0, 2^-8)``, not ``[0, 1)``.
        """
        return (self.next_u64() & _MASK56) * _INV_64

    def bounded(self, bound: int) -> int:
        return sampling.bounded(self.next_u64, bound, MASK64)

    def shuffle(self, n: int, swap) -> None:
        """Fisher-Yates shuffle calling ``swap(i, j)``; negative ``n`` raises ``ValueError``."""
        sampling.shuffle(n, swap, self.bounded)

    def permutation(self, n: int) -> List[int]:
        return sampling.permutation(n, self.bounded)

    def fill_bytes(self, buffer: MutableSequence[int]) -> int:
        """Fill ``buffer`` in place with little-endian 64-bit draws."""
        return sampling.fill_bytes(buffer, self.next_u64, 8)

    # -- quality path ----------------------------------------------------

    def step128(self) -> Tuple[int, int]:
        """Advance ``(hi, lo)`` as one 128-bit LCG and return the new words."""

        hi_state, lo_state = self.hi.state, self.lo.state

        # Low 128 bits of state * mul: full product of the low words plus the
        # two cross terms, which only reach the high word.
        hi, lo = mul64(lo_state, MUL_LO)
        hi = (hi + hi_state * MUL_LO + lo_state * MUL_HI) & MASK64

        lo, carry = add64(lo, INC_LO)
        hi, _ = add64(hi, INC_HI, carry)

        self.hi.state = hi
        self.lo.state = lo
        return hi, lo

    def next_u64_mcg(self) -> int:
        hi, lo = self.step128()

        hi ^= hi >> 22
        hi = (hi * CHEAP_MULTIPLIER) & MASK64
        hi ^= hi >> 48
        # lo | 1 keeps the final multiplier odd, so the step stays a bijection.
        hi = (hi * (lo | 1)) & MASK64
        return hi

    # -- jumps -----------------------------------------------------------

    def advance(self, delta: int) -> "PCG64":
        """Jump both halves forward ``delta`` steps."""
        self.hi.advance(delta)
        self.lo.advance(delta)
        return self

    def retreat(self, delta: int) -> "PCG64":
        self.hi.retreat(delta)
        self.lo.retreat(delta)
        return self

    # -- serialization ---------------------------------------------------

    def to_bytes(self) -> bytes:
        return codec.encode(self)

    def to_bytes_into(self, buffer, offset: int = 0) -> int:
        return codec.encode_into(self, buffer, offset)

    def restore(self, data) -> "PCG64":
        """Load state words from a record; increments are left untouched.

        The record is fully validated before anything is assigned, so a
        rejected record leaves the generator unchanged.
        """

        hi_state, lo_state = codec.decode(data)
        self.hi.state = hi_state
        self.lo.state = lo_state
        logger.debug("pcg64 restored: hi=%#x lo=%#x", hi_state, lo_state)
        return self
