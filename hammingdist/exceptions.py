from __future__ import generator_stop

from numbers import Integral
from typing import Any, Sized, Tuple, Type, Union


class LengthMismatch(ValueError):
    """Raised when two inputs which are compared position by position don't have the same length.
    `kind` describes the representation of the inputs, eg. "strings" or "byte sequences".
    """

    def __init__(self, len_a: int, len_b: int, kind: str = "sequences") -> None:
        ValueError.__init__(self, f"{kind.capitalize()} do not have equal length: {len_a} != {len_b}")
        self.len_a = len_a
        self.len_b = len_b
        self.kind = kind


def assert_type(name: str, value: Any, types: Union[Type[Any], Tuple[Type[Any], ...]]) -> None:

    if not isinstance(value, types):
        if not isinstance(types, tuple):
            types = (types,)
        raise TypeError(
            "{} must be one of these types: {}. Not: {}".format(name, ", ".join(map(str, types)), type(value))
        )


def assert_byte(name: str, value: Any) -> None:

    # bool is an int subclass, but not a byte. numpy.bool_ is not Integral.
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer. Not: {type(value)}")

    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in range 0-255, not {value}")


def assert_equal_length(a: Sized, b: Sized, kind: str = "sequences") -> int:

    """Returns the common length of `a` and `b` or raises `LengthMismatch`."""

    len_a = len(a)
    len_b = len(b)

    if len_a != len_b:
        raise LengthMismatch(len_a, len_b, kind)

    return len_a
