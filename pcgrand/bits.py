"""Fixed-width unsigned arithmetic on top of Python's unbounded integers."""

MASK32 = (1 << 32) - 1
MASK63 = (1 << 63) - 1
MASK64 = (1 << 64) - 1


def to_u32(value: int) -> int:
    """Clip an integer so that it occupies 32 bits."""
    return value & MASK32


def to_u64(value: int) -> int:
    """Clip an integer so that it occupies 64 bits."""
    return value & MASK64


def rotr32(value: int, rot: int) -> int:
    rot &= 31
    return ((value >> rot) | (value << ((-rot) & 31))) & MASK32


def mul64(a: int, b: int) -> tuple[int, int]:
    """Full 64x64 -> 128 bit product, returned as ``(hi, lo)`` words."""
    product = (a & MASK64) * (b & MASK64)
    return product >> 64, product & MASK64


def add64(a: int, b: int, carry: int = 0) -> tuple[int, int]:
    """64-bit add with carry in and carry out, returned as ``(sum, carry)``."""
    total = (a & MASK64) + (b & MASK64) + (carry & 1)
    return total & MASK64, total >> 64


def lcg_advance(state: int, delta: int, mul: int, add: int) -> int:
    """Jump the LCG ``state * mul + add (mod 2^64)`` forward ``delta`` steps.

    Binary exponentiation of the affine map: each set bit of ``delta`` folds the
    current power of the map into an accumulated multiplier and increment, and
    the map is squared for the next bit. Runs in O(log delta).
    """

    delta &= MASK64
    acc_mul = 1
    acc_add = 0
    while delta > 0:
        if delta & 1:
            acc_mul = (acc_mul * mul) & MASK64
            acc_add = (acc_add * mul + add) & MASK64
        add = ((mul + 1) * add) & MASK64
        mul = (mul * mul) & MASK64
        delta >>= 1
    return (acc_mul * state + acc_add) & MASK64
