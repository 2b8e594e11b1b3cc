# pyre-unsafe
"""Stream of bootstrap resamples."""

from typing import Any

import numpy as np
import numpy.typing as npt

from bootkde.sample import Sample


class Resamples:
    """Resamples

    Infinite sequence of bootstrap resamples of a Sample. Every
    resample has the same size as the sample and is drawn from it
    with replacement.

    Parameters
    ----------
     sample : Sample
        The sample to resample.
     seed : int or numpy Generator, optional
        Seed for the random draws. If a Generator is passed it is used
        as-is, and the draws advance its state. If None (default), the
        generator is seeded from fresh OS entropy.

    Notes
    -----
    The random state is private to this object; a Resamples must not be
    shared between threads. Create one per worker instead.

    Examples
    --------
    >>> resamples = Resamples(Sample([1.0, 2.0, 3.0]), seed=0)
    >>> x_star = resamples.next()
    >>> len(x_star)
    3

    """

    sample: Sample

    def __init__(
        self, sample: Sample, seed: int | np.random.Generator | None = None
    ) -> None:
        self.sample = sample
        self._rng = np.random.default_rng(seed)

    def __iter__(self) -> "Resamples":
        return self

    def __next__(self) -> npt.NDArray[np.floating[Any]]:
        data = self.sample.data
        n = len(data)
        if n == 0:
            return data

        ind = self._rng.integers(0, n, size=n)
        x_star = data[ind]
        x_star.flags.writeable = False
        return x_star

    def next(self) -> npt.NDArray[np.floating[Any]]:
        """Draw the next resample."""
        return self.__next__()
