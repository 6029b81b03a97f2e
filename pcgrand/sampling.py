"""Sampling helpers shared by the 32-bit and 64-bit generators.

Every helper only needs a draw callable, so both generators plug their own
native-width output in and get identical contracts.
"""

from typing import Callable, List, MutableSequence

Draw = Callable[[], int]
Swap = Callable[[int, int], None]


def bounded(draw: Draw, bound: int, mask: int) -> int:
    """Uniform value in ``[0, bound)`` without modulo bias.

    ``threshold`` is ``2^width mod bound``; draws below it belong to the short
    final bucket and are rejected. Fewer than half the draws are ever rejected.
    Raises ``ValueError`` when ``bound`` does not fit the draw width.
    """

    if bound < 0 or bound > mask:
        raise ValueError(f"bound {bound} outside [0, {mask:#x}]")
    if bound == 0:
        return 0

    threshold = (-bound & mask) % bound
    while True:
        r = draw()
        if r >= threshold:
            return r % bound


def shuffle(n: int, swap: Swap, pick: Callable[[int], int]) -> None:
    """Fisher-Yates over ``n`` elements, ``pick(k)`` returning a value in ``[0, k)``."""

    if n < 0:
        raise ValueError(f"invalid argument to shuffle: n={n} must be non-negative")

    for i in range(n - 1, 0, -1):
        j = pick(i + 1)
        swap(i, j)


def permutation(n: int, pick: Callable[[int], int]) -> List[int]:
    if n < 0:
        raise ValueError(f"invalid argument to permutation: n={n} must be non-negative")

    result = list(range(n))

    def _swap(i: int, j: int) -> None:
        result[i], result[j] = result[j], result[i]

    shuffle(n, _swap, pick)
    return result


def fill_bytes(buffer: MutableSequence[int], draw: Draw, width: int) -> int:
    """Fill ``buffer`` with little-endian draws of ``width`` bytes each.

    The last draw is only partially written when ``len(buffer)`` is not a
    multiple of ``width``. Memoryviews are filled through a byte-formatted
    view whatever their item format, and the byte count is returned; for any
    other buffer the result is ``len(buffer)``.
    """

    if isinstance(buffer, memoryview):
        buffer = buffer.cast("B")
    n = len(buffer)
    for offset in range(0, n, width):
        chunk = draw().to_bytes(width, "little")
        buffer[offset : offset + width] = chunk[: n - offset]
    return n
