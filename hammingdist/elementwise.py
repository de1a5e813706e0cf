from __future__ import generator_stop

import logging
from typing import Optional, Sequence

from .concurrency import parallel_sum
from .exceptions import assert_equal_length, assert_type
from .sequence import DEFAULT_CHUNKSIZE, batch, num_batches
from .typing import ComparableT

logger = logging.getLogger(__name__)


def _kind(a: Sequence, b: Sequence) -> str:
    if isinstance(a, str) and isinstance(b, str):
        return "strings"
    return "sequences"


def _count_different(a: Sequence[ComparableT], b: Sequence[ComparableT]) -> int:
    # identity first, like the builtin sequence comparison, so nan equals itself
    return sum(1 for x, y in zip(a, b) if x is not y and x != y)


def element_distance(a: Sequence[ComparableT], b: Sequence[ComparableT]) -> int:

    """Number of positions at which the elements of `a` and `b` are not equal.
    Works for any sequence type. Strings are compared character by character (code points).
    Raises `LengthMismatch` if `a` and `b` differ in length.

    Example:
    element_distance("Cat", "Hat") -> 1
    element_distance(["a", "b"], ["c", "d"]) -> 2
    """

    assert_equal_length(a, b, _kind(a, b))
    return _count_different(a, b)


def text_distance(a: str, b: str) -> int:

    """Hamming distance of two strings of the same number of characters.
    Characters are compared by code point, no normalization is applied.
    """

    assert_type("a", a, str)
    assert_type("b", b, str)

    return element_distance(a, b)


def element_distance_chunked(
    a: Sequence[ComparableT],
    b: Sequence[ComparableT],
    chunksize: int = DEFAULT_CHUNKSIZE,
    parallel: bool = True,
    workers: Optional[int] = None,
) -> int:

    """Same as `element_distance()`, but the sequences are processed in chunks of `chunksize`
    elements on a thread pool.
    """

    length = assert_equal_length(a, b, _kind(a, b))
    logger.debug("Calculating element distance of %d elements in %d chunks", length, num_batches(length, chunksize))

    return parallel_sum(
        _count_different, batch(a, chunksize), batch(b, chunksize), parallel=parallel, workers=workers
    )
