"""Binary record for a composite generator's state.

Layout (20 bytes)::

    b"pcg:" | hi.state (u64, big-endian) | lo.state (u64, big-endian)

Only the two state words are stored. Stream increments are not part of the
record, so a generator seeded with non-default sequences must be re-seeded
(or built with the same increments) before restoring a record into it. There
is no version field; any change to the layout is a breaking format change.
"""

import logging
import struct

from .bits import MASK64
from .errors import InvalidEncoding

logger = logging.getLogger(__name__)

MAGIC = b"pcg:"
RECORD_SIZE = 20

_RECORD = struct.Struct(">4sQQ")


def _put_u64_be(buffer: bytearray, offset: int, value: int) -> None:
    for i in range(8):
        buffer[offset + i] = (value >> (56 - 8 * i)) & 0xFF


def _get_u64_be(data: bytes, offset: int) -> int:
    value = 0
    for i in range(8):
        value = (value << 8) | data[offset + i]
    return value


def encode(generator) -> bytes:
    """Serialize ``generator.hi.state`` / ``generator.lo.state`` with explicit shifts."""

    record = bytearray(RECORD_SIZE)
    record[:4] = MAGIC
    _put_u64_be(record, 4, generator.hi.state & MASK64)
    _put_u64_be(record, 12, generator.lo.state & MASK64)
    return bytes(record)


def encode_into(generator, buffer, offset: int = 0) -> int:
    """Write the record into a caller-provided buffer and return the bytes written.

    Nothing is allocated for the result. The format string pins big-endian order,
    so the output is identical to :func:`encode` on every platform. Raises
    ``struct.error`` when the buffer has fewer than 20 bytes past ``offset``.
    """

    _RECORD.pack_into(
        buffer,
        offset,
        MAGIC,
        generator.hi.state & MASK64,
        generator.lo.state & MASK64,
    )
    return RECORD_SIZE


def decode(data) -> tuple[int, int]:
    """Parse a record into ``(hi_state, lo_state)``.

    Raises :class:`InvalidEncoding` when the length is not exactly 20 bytes or
    the magic tag is missing. Anything that is not a bytes-like object raises
    ``TypeError``.
    """

    data = memoryview(data).tobytes()
    if len(data) != RECORD_SIZE:
        logger.debug("rejecting pcg record of %d bytes", len(data))
        raise InvalidEncoding(
            f"invalid PCG encoding: expected {RECORD_SIZE} bytes, got {len(data)}"
        )
    if data[:4] != MAGIC:
        logger.debug("rejecting pcg record with tag %r", data[:4])
        raise InvalidEncoding(f"invalid PCG encoding: bad magic tag {data[:4]!r}")

    return _get_u64_be(data, 4), _get_u64_be(data, 12)
