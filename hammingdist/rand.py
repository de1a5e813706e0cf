from random import choice, randrange
from typing import List


def randstr(length: int, charset: str) -> str:
    """Returns a (noncryptographic) random string consisting of characters from `charset`
    of length `length`.
    """

    return "".join(choice(charset) for i in range(length))  # nosec


def randbytes(size: int) -> bytes:
    """Returns (noncryptographic) random bytes of length `length`."""

    return bytes(randrange(0, 256) for _ in range(size))  # nosec


def randbyte() -> int:
    return randrange(0, 256)  # nosec


def randlist(size: int, stop: int) -> List[int]:
    """Returns a list of `size` (noncryptographic) random ints in range [0, stop)."""

    return [randrange(0, stop) for _ in range(size)]  # nosec
