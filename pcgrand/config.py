"""Declarative generator setup."""

from dataclasses import dataclass, replace
from typing import Union

from .pcg64 import PCG64
from .prng import PCG32

KINDS = ("pcg32", "pcg64")


def parse_int(value: Union[int, str]) -> int:
    """Accept ints or strings in decimal / 0x-prefixed hex."""

    if isinstance(value, int):
        return value
    return int(value.strip(), 0)


@dataclass
class GeneratorConfig:
    """Seed material for building a generator."""

    kind: str = "pcg64"
    seed1: int = 0
    seed2: int = 0  # pcg64 only
    seq1: int = 0
    seq2: int = 0  # pcg64 only
    advance: int = 0

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown generator kind '{self.kind}'. Expected one of {KINDS}.")
        self.seed1 = parse_int(self.seed1)
        self.seed2 = parse_int(self.seed2)
        self.seq1 = parse_int(self.seq1)
        self.seq2 = parse_int(self.seq2)
        self.advance = parse_int(self.advance)

    def for_worker(self, index: int, stride: int) -> "GeneratorConfig":
        """Copy offset by ``index * stride`` steps, for non-overlapping per-worker streams."""
        if index < 0 or stride < 0:
            raise ValueError("Worker index and stride must be non-negative.")
        return replace(self, advance=self.advance + index * stride)


def build_generator(cfg: GeneratorConfig) -> Union[PCG32, PCG64]:
    if cfg.kind == "pcg32":
        rng: Union[PCG32, PCG64] = PCG32().seed(cfg.seed1, cfg.seq1)
    else:
        rng = PCG64().seed(cfg.seed1, cfg.seed2, cfg.seq1, cfg.seq2)

    if cfg.advance:
        rng.advance(cfg.advance)
    return rng
