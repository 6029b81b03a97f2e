"""Public package surface for the pcgrand PCG generators."""

from .codec import MAGIC, RECORD_SIZE, decode, encode, encode_into
from .config import GeneratorConfig, build_generator
from .errors import InvalidEncoding
from .pcg64 import PCG64
from .prng import PCG32

__all__ = [
    "GeneratorConfig",
    "InvalidEncoding",
    "MAGIC",
    "PCG32",
    "PCG64",
    "RECORD_SIZE",
    "build_generator",
    "decode",
    "encode",
    "encode_into",
]
