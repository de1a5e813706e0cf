from __future__ import generator_stop

from typing import Any, Sequence, TypeVar, Union

from typing_extensions import Protocol  # typing.Protocol is available in Python 3.8+

BytesLike = Union[bytes, bytearray, memoryview]
ByteSequence = Union[BytesLike, Sequence[int]]


class Comparable(Protocol):
    def __eq__(self, other: Any) -> bool:
        ...

    def __ne__(self, other: Any) -> bool:
        ...


ComparableT = TypeVar("ComparableT", bound=Comparable)
