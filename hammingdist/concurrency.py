from __future__ import generator_stop

import concurrent.futures
import logging
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

U = TypeVar("U")

logger = logging.getLogger(__name__)


def executor_map(
    func: Callable[..., U],
    *its: Iterable[Any],
    executercls: Optional[Callable] = None,
    parallel: bool = True,
    workers: Optional[int] = None,
) -> Iterator[U]:

    """Same as the builtin `map()`, but the calls are distributed to a `concurrent.futures` executor.
    Results are yielded in the order of the input. If `parallel` is False, everything runs
    in the calling thread.
    Exceptions raised by `func` are re-raised when the corresponding result is reached.
    """

    if parallel:

        if executercls is None:
            executercls = concurrent.futures.ThreadPoolExecutor

        with executercls(workers) as executor:
            futures = [executor.submit(func, *args) for args in zip(*its)]
            logger.debug("Submitted %d tasks to %s", len(futures), executercls.__name__)

            try:
                for future in futures:
                    yield future.result()
            except GeneratorExit:
                for future in futures:
                    future.cancel()
                raise
    else:
        yield from map(func, *its)


def parallel_sum(
    func: Callable[..., int],
    *its: Iterable[Any],
    parallel: bool = True,
    workers: Optional[int] = None,
) -> int:

    """Sums the results of `executor_map()`."""

    return sum(executor_map(func, *its, parallel=parallel, workers=workers))
