from contextlib import contextmanager
from functools import wraps
from itertools import product, zip_longest
from typing import Any, Callable, Iterable, Iterator, Optional
from unittest import TestCase

from .exceptions import LengthMismatch


class MyTestCase(TestCase):
    def assertIterEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        for i, (a, b) in enumerate(zip_longest(first, second)):
            if msg:
                msg = " : " + str(msg)
            self.assertEqual(a, b, msg=f"in iteration index {i}: {msg}")

    def assertAllEqual(self, args: Iterable, msg: Optional[str] = None) -> None:
        it = iter(args)
        first = next(it)
        for second in it:
            self.assertEqual(first, second, msg)

    @contextmanager
    def assertLengthMismatch(self, len_a: int, len_b: int, kind: Optional[str] = None) -> Iterator[None]:
        """Fails unless the block raises `LengthMismatch` for the given lengths (and `kind` if given)."""

        with self.assertRaises(LengthMismatch) as cm:
            yield

        self.assertEqual((len_a, len_b), (cm.exception.len_a, cm.exception.len_b))
        if kind is not None:
            self.assertEqual(kind, cm.exception.kind)


def random_arguments(n: int, *funcs: Callable[[], Any]) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for i in range(n):
                with self.subTest(str(i)):
                    if func(self, *(f() for f in funcs)) is not None:
                        raise AssertionError

        return inner

    return decorator


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def parametrize_product(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in product(*args_list):
                with self.subTest(str(args)):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator
