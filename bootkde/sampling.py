# pyre-unsafe
"""Core bootstrap sampling functions."""

import math

import numpy as np
import numpy.typing as npt

from bootkde._utils import (
    ArrayLike,
    Statistic,
    TwoSampleStatistic,
    _num_threads,
    _seeds,
)
from bootkde.distributions import Distribution
from bootkde.parallel import divide
from bootkde.resamples import Resamples
from bootkde.sample import Sample


def _as_sample(x: Sample | ArrayLike) -> Sample:
    if isinstance(x, Sample):
        return x
    return Sample(x)


def bootstrap(
    sample: Sample | ArrayLike,
    statistic: Statistic,
    nresamples: int,
    num_threads: int = -1,
    seed: int | None = None,
    dtype: npt.DTypeLike | None = None,
) -> Distribution:
    """Bootstrap distribution of a statistic.

    Parameters
    ----------
     sample : Sample or array_like
        The data.
     statistic : function
        The statistic. Called with a read-only ndarray holding one
        resample. Must be safe to call from several threads at once.
     nresamples : int
        Number of bootstrap resamples.
     num_threads : int, optional
        Number of threads to use. Defaults to -1, meaning all available
        cores. Set to 1 to force single-threaded processing.
     seed : int, optional
        Seed for the resamples. If None (default), seeds are drawn from
        the global numpy random state.
     dtype : data-type, optional
        Type of the statistic values. Defaults to the dtype of the
        sample. Use `object` for statistics that do not return scalars.

    Returns
    -------
     distribution : Distribution
        Exactly `nresamples` values of the statistic.

    Notes
    -----
    Multithreading kicks in when more than one thread is available and
    there are more resamples than observations. The output is then
    split into one contiguous chunk per thread, and each chunk is
    filled from its own stream of resamples, so the order of the values
    depends on the number of threads.

    """
    if nresamples <= 0:
        raise ValueError(f"Invalid nresamples: {nresamples}")

    sample = _as_sample(sample)
    num_threads = _num_threads(num_threads)
    if dtype is None:
        dtype = sample.dtype

    if num_threads > 1 and nresamples > len(sample):
        granularity = nresamples // num_threads + 1
        nchunks = -(-nresamples // granularity)
        seeds = _seeds(nchunks, seed)
        theta_star = np.empty((nresamples,), dtype=dtype)

        def _bootstrap_sim(chunk, offset):
            resamples = Resamples(sample, seed=seeds[offset // granularity])
            for i in range(len(chunk)):
                chunk[i] = statistic(resamples.next())

        divide(theta_star, granularity, _bootstrap_sim, num_threads=num_threads)
    else:
        resamples = Resamples(sample, seed=_seeds(1, seed)[0])
        theta_star = np.fromiter(
            (statistic(x_star) for x_star in resamples),
            dtype=dtype,
            count=nresamples,
        )

    return Distribution(theta_star)


def bootstrap2(
    first: Sample | ArrayLike,
    second: Sample | ArrayLike,
    statistic: TwoSampleStatistic,
    nresamples: int,
    num_threads: int = -1,
    seed: int | None = None,
    dtype: npt.DTypeLike | None = None,
) -> Distribution:
    """Bootstrap distribution of a two-sample statistic.

    Parameters
    ----------
     first, second : Sample or array_like
        The two data sets.
     statistic : function
        The statistic. Called as `statistic(first_star, second_star)`
        with one resample of each data set. Must be safe to call from
        several threads at once.
     nresamples : int
        Requested number of bootstrap resamples. Rounded up to the
        next perfect square; see Notes.
     num_threads : int, optional
        Number of threads to use. Defaults to -1, meaning all available
        cores. Set to 1 to force single-threaded processing.
     seed : int, optional
        Seed for the resamples. If None (default), seeds are drawn from
        the global numpy random state.
     dtype : data-type, optional
        Type of the statistic values. Defaults to a dtype able to hold
        both samples.

    Returns
    -------
     distribution : Distribution
        The statistic values. Callers should check its length, which
        is k * k rather than `nresamples`.

    Notes
    -----
    With k = ceil(sqrt(`nresamples`)), we draw k resamples of `first`,
    and pair each of them with k resamples of `second`, giving a k by k
    grid stored row by row. Every row has its own stream of resamples,
    so for a given seed the result does not depend on `num_threads`.

    """
    if nresamples <= 0:
        raise ValueError(f"Invalid nresamples: {nresamples}")

    first = _as_sample(first)
    second = _as_sample(second)
    num_threads = _num_threads(num_threads)
    if dtype is None:
        dtype = np.result_type(first.dtype, second.dtype)

    # ceil(sqrt(nresamples)), without rounding errors
    k = math.isqrt(nresamples - 1) + 1
    nresamples = k * k

    seeds = _seeds(k, seed)
    theta_star = np.empty((nresamples,), dtype=dtype)
    grid = theta_star.reshape((k, k))

    def _bootstrap_rows(rows, offset):
        for i, row in enumerate(rows):
            rng = np.random.default_rng(seeds[offset + i])
            x_star = Resamples(first, seed=rng).next()
            other_resamples = Resamples(second, seed=rng)
            for j in range(k):
                row[j] = statistic(x_star, other_resamples.next())

    if num_threads > 1 and nresamples > len(first) + len(second):
        granularity = k // num_threads + 1
        divide(grid, granularity, _bootstrap_rows, num_threads=num_threads)
    else:
        _bootstrap_rows(grid, 0)

    return Distribution(theta_star)
