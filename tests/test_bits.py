"""Fixed-width helper tests."""

from pcgrand.bits import MASK32, MASK64, add64, lcg_advance, mul64, rotr32, to_u32, to_u64
from pcgrand.prng import MULTIPLIER


def test_mul64_splits_full_product():
    hi, lo = mul64(MASK64, MASK64)

    assert (hi << 64) | lo == MASK64 * MASK64
    assert hi == MASK64 - 1
    assert lo == 1


def test_add64_carry_propagation():
    assert add64(MASK64, 1) == (0, 1)
    assert add64(MASK64, MASK64, 1) == (MASK64, 1)
    assert add64(1, 2) == (3, 0)


def test_rotr32():
    assert rotr32(0x80000001, 1) == 0xC0000000
    assert rotr32(0x12345678, 0) == 0x12345678
    assert rotr32(0x12345678, 32) == 0x12345678


def test_clipping():
    assert to_u32(-1) == MASK32
    assert to_u64(1 << 64) == 0


def test_lcg_advance_matches_loop():
    state = 1
    for _ in range(10):
        state = (state * MULTIPLIER + 1) & MASK64

    assert lcg_advance(1, 10, MULTIPLIER, 1) == state == 7783159857423531983


def test_lcg_advance_zero_is_identity():
    assert lcg_advance(12345, 0, MULTIPLIER, 7) == 12345
    assert lcg_advance(12345, 1 << 64, MULTIPLIER, 7) == 12345
