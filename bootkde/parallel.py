# pyre-unsafe
"""Data-parallel execution over disjoint chunks of a buffer."""

from collections.abc import Callable
from typing import Any

import numpy.typing as npt
from pathos.pools import _ThreadPool as Pool

from bootkde._utils import _num_threads


def divide(
    buffer: npt.NDArray[Any],
    granularity: int,
    work: Callable[[npt.NDArray[Any], int], None],
    num_threads: int = -1,
) -> None:
    """Process a buffer in parallel, chunk by chunk.

    Parameters
    ----------
     buffer : ndarray
        The buffer to fill. Chunks are taken along the first axis.
     granularity : int
        Number of rows in each chunk. The last chunk may be smaller.
     work : function
        Called as `work(chunk, offset)` once per chunk, where `chunk`
        is a view of `buffer[offset:offset + granularity]`. It should
        write its results into `chunk`.
     num_threads : int, optional
        Number of worker threads. Defaults to the number of available
        CPUs.

    Notes
    -----
    Each call to `work` receives a view scoped to its own rows, so
    the writes of different workers never overlap and no locking is
    needed. Returns once every chunk is done. If any call to `work`
    raises, the exception is re-raised here, and the contents of `buffer` should be discarded.

    """
    if granularity < 1:
        raise ValueError(f"Invalid granularity: {granularity}")

    num_threads = _num_threads(num_threads)

    # Private to this call, never shared with concurrent or nested calls.
    with Pool(num_threads) as pool:
        results = []
        for offset in range(0, len(buffer), granularity):
            chunk = buffer[offset : offset + granularity]
            results.append(pool.apply_async(work, (chunk, offset)))

        for res in results:
            res.get()
