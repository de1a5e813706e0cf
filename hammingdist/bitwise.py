from __future__ import generator_stop

import logging
from typing import Optional

import numpy as np

from .concurrency import parallel_sum
from .exceptions import assert_byte, assert_equal_length
from .sequence import DEFAULT_CHUNKSIZE, batch, num_batches
from .typing import ByteSequence, BytesLike

logger = logging.getLogger(__name__)

_KIND = "byte sequences"

_bit_counts = tuple(bin(x).count("1") for x in range(256))


def bit_distance(a: int, b: int) -> int:

    """Number of bit positions where the bytes `a` and `b` differ,
    ie. the population count of `a ^ b`. The result is in range 0-8.

    Example:
    bit_distance(0x01, 0x03) -> 1
    bit_distance(0x01, 0xFF) -> 7
    """

    assert_byte("a", a)
    assert_byte("b", b)

    return _bit_counts[int(a) ^ int(b)]


def _flat(seq: ByteSequence) -> ByteSequence:
    if isinstance(seq, np.ndarray) and seq.dtype == np.uint8:
        seq = memoryview(seq)

    # len() of a multi-byte or multi-dimensional memoryview doesn't count bytes
    if isinstance(seq, memoryview):
        if not seq.c_contiguous:
            seq = memoryview(seq.tobytes())
        return seq.cast("B")

    return seq


def _bytes_bit_distance(a: BytesLike, b: BytesLike) -> int:
    # one big xor instead of a python level loop
    return bin(int.from_bytes(a, "big") ^ int.from_bytes(b, "big")).count("1")


def bit_distance_seq(a: ByteSequence, b: ByteSequence) -> int:

    """Sum of the bitwise distances of the bytes in `a` and `b` at the same positions.
    Both can be bytes-like objects, numpy uint8 arrays or sequences of ints in range 0-255.
    Raises `LengthMismatch` if they differ in length.

    Example:
    bit_distance_seq([0x01, 0x01], [0x03, 0xFF]) -> 8
    """

    a = _flat(a)
    b = _flat(b)

    assert_equal_length(a, b, _KIND)

    if isinstance(a, (bytes, bytearray, memoryview)) and isinstance(b, (bytes, bytearray, memoryview)):
        return _bytes_bit_distance(a, b)

    return sum(bit_distance(x, y) for x, y in zip(a, b))


def bit_distance_chunked(
    a: ByteSequence,
    b: ByteSequence,
    chunksize: int = DEFAULT_CHUNKSIZE,
    parallel: bool = True,
    workers: Optional[int] = None,
) -> int:

    """Same as `bit_distance_seq()`, but splits the inputs into chunks of `chunksize` bytes
    and sums the partial distances which are calculated using a thread pool.
    """

    a = _flat(a)
    b = _flat(b)

    length = assert_equal_length(a, b, _KIND)
    logger.debug("Calculating bit distance of %d bytes in %d chunks", length, num_batches(length, chunksize))

    return parallel_sum(
        bit_distance_seq, batch(a, chunksize), batch(b, chunksize), parallel=parallel, workers=workers
    )
