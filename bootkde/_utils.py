# pyre-unsafe
"""Private utility functions and type aliases."""

import multiprocessing as mp
import warnings
from collections.abc import Callable
from typing import Any, TypeAlias

import numpy as np
import numpy.typing as npt
import pandas as pd

# Type aliases for common types
ArrayLike: TypeAlias = (
    npt.NDArray[np.floating[Any]] | list[float] | pd.Series | pd.DataFrame
)
Statistic: TypeAlias = Callable[[npt.NDArray[np.floating[Any]]], Any]
TwoSampleStatistic: TypeAlias = Callable[
    [npt.NDArray[np.floating[Any]], npt.NDArray[np.floating[Any]]], Any
]

# Width, in bytes, of the vector registers the lane split targets.
VECTOR_BYTES = 32


def _num_threads(num_threads: int) -> int:
    """Resolve the number of worker threads.

    Parameters
    ----------
     num_threads : int
        Requested number of threads. -1 means all available cores.

    Returns
    -------
     num_threads : int
        A positive number of threads.

    """
    if num_threads == -1:
        return mp.cpu_count()

    if num_threads < 1:
        raise ValueError(f"Invalid num_threads: {num_threads}")

    return num_threads


def _seeds(n: int, seed: int | None = None) -> npt.NDArray[np.int64]:
    """Seeds for `n` independent generators.

    Parameters
    ----------
     n : int
        Number of seeds.
     seed : int, optional
        Root seed. If None (default), the seeds are drawn from the
        global numpy random state, so that `np.random.seed` controls
        them.

    Returns
    -------
     seeds : ndarray of ints
        One seed per generator.

    """
    if seed is None:
        return np.random.randint(0, 2**32 - 1, n, dtype=np.int64)

    return np.random.default_rng(seed).integers(0, 2**32 - 1, n)


def _lane_width(dtype: npt.DTypeLike) -> int:
    """Number of elements of `dtype` that fit in one vector register."""
    return max(VECTOR_BYTES // np.dtype(dtype).itemsize, 1)


def _split_lanes(
    x: npt.NDArray[np.floating[Any]], width: int
) -> tuple[
    npt.NDArray[np.floating[Any]],
    npt.NDArray[np.floating[Any]],
    npt.NDArray[np.floating[Any]],
]:
    """Split an array into head, body and tail.

    Parameters
    ----------
     x : ndarray
        One dimensional, contiguous array.
     width : int
        Number of lanes.

    Returns
    -------
     head : ndarray
        Elements before the first address aligned to a full vector.
     body : ndarray
        Aligned elements, with shape (m, `width`).
     tail : ndarray
        Elements after the last full vector.

    Notes
    -----
    All three are views on `x`, and together they cover every element
    of `x` exactly once, in order.

    """
    n = len(x)
    if n == 0:
        return x, x.reshape((0, width)), x

    skew = (x.ctypes.data // x.itemsize) % width
    start = min((width - skew) % width, n)
    stop = start + ((n - start) // width) * width

    return x[:start], x[start:stop].reshape((-1, width)), x[stop:]


def _percentile(
    z: npt.NDArray[Any], p: float | list[float]
) -> npt.NDArray[Any]:
    """Percentiles of an array.

    Parameters
    ----------
     z : array_like
        Data. Not assumed to be sorted.
     p : float or list of floats
        Numbers in (0, 1), specifying the percentiles.

    Returns
    -------
     percentiles : ndarray
        One value of `z` per entry of `p`.

    Notes
    -----
    Uses the order statistics recommended in S12.5 of [ET93]: when
    B * alpha is not an integer, the lower end uses the
    floor((B + 1) * alpha)th smallest value and the upper end its
    mirror image.

    """
    B = len(z)
    if not isinstance(p, list):
        p = [p]

    sorted_z = np.sort(z)
    percentiles = np.empty((len(p),), dtype=sorted_z.dtype)
    for i, pi in enumerate(p):
        upper = pi > 0.5
        if upper:
            Balpha = B - B * pi
            alpha = 1 - pi
        else:
            alpha = pi
            Balpha = B * alpha

        if int(Balpha) == Balpha:
            k = int(Balpha)
            if upper:
                k = B - k
        else:
            k = int(np.floor(Balpha + alpha))
            if upper:
                k = B + 1 - k

        if k < 1 or k > B:
            warnings.warn("Index outside of bounds. Try more bootstrap samples.")
            k = min(max(k, 1), B)

        percentiles[i] = sorted_z[k - 1]

    return percentiles
