from __future__ import generator_stop

from typing import Optional

import numpy as np

from .exceptions import LengthMismatch, assert_equal_length

_bit_counts = np.array([int(bin(x).count("1")) for x in range(256)]).astype(np.uint8)


def _assert_axis_length(a: np.ndarray, b: np.ndarray, axis: Optional[int]) -> None:
    """Raises `LengthMismatch` if `a` and `b` cannot be broadcast together because
    of the length of the compared `axis`. For `axis=None` the shapes must be equal.
    """

    if axis is None:
        if a.shape != b.shape:
            raise LengthMismatch(a.size, b.size, "arrays")
        return

    try:
        np.broadcast_shapes(a.shape, b.shape)
    except ValueError:
        ndim = max(a.ndim, b.ndim)
        shape_a = (1,) * (ndim - a.ndim) + a.shape
        shape_b = (1,) * (ndim - b.ndim) + b.shape
        len_a, len_b = shape_a[axis], shape_b[axis]

        if len_a != len_b and 1 not in (len_a, len_b):
            raise LengthMismatch(len_a, len_b, "arrays") from None
        raise


def bit_distance_bytes(a: bytes, b: bytes) -> int:
    assert_equal_length(a, b, "byte sequences")
    a_bits = np.unpackbits(np.frombuffer(a, dtype=np.uint8))
    b_bits = np.unpackbits(np.frombuffer(b, dtype=np.uint8))
    return int(np.count_nonzero(a_bits != b_bits))


def bit_distance_packed(a: np.ndarray, b: np.ndarray, axis: Optional[int] = -1) -> np.ndarray:

    """Bitwise Hamming distance of arrays of packed bytes (values 0-255) along `axis`.
    The other dimensions are broadcast, so `bit_distance_packed(a[None, :], b[:, None])`
    calculates all pairwise distances.
    """

    a = np.asarray(a)
    b = np.asarray(b)
    _assert_axis_length(a, b, axis)
    return np.sum(_bit_counts[np.bitwise_xor(a, b)], axis=axis)


def element_distance_array(a: np.ndarray, b: np.ndarray, axis: Optional[int] = -1) -> np.ndarray:

    """Number of unequal elements of `a` and `b` along `axis`. Other dimensions are broadcast."""

    a = np.asarray(a)
    b = np.asarray(b)
    _assert_axis_length(a, b, axis)
    return np.count_nonzero(a != b, axis=axis)
