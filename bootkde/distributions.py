# pyre-unsafe
"""Bootstrap distribution of a statistic."""

from typing import Any, Literal

import numpy as np
import numpy.typing as npt

from bootkde._utils import _percentile


class Distribution:
    r"""Bootstrap Distribution

    The values of a statistic, one per bootstrap resample.

    Parameters
    ----------
     values : ndarray
        The bootstrapped statistic values. The Distribution takes
        ownership of the array.

    Notes
    -----
    The order of the values carries no meaning for single-sample
    bootstraps. For two-sample bootstraps the values are the rows of
    a square grid, one row per resample of the first sample, laid out
    end to end.

    """

    def __init__(self, values: npt.NDArray[Any]) -> None:
        self._values = values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __getitem__(self, key):
        return self._values[key]

    def __array__(self, dtype=None, copy=None):
        if dtype is not None and np.dtype(dtype) != self._values.dtype:
            if copy is False:
                raise ValueError(f"Converting to {np.dtype(dtype)} requires a copy")
            return self._values.astype(dtype)
        if copy:
            return self._values.copy()
        return self._values

    def __repr__(self) -> str:
        return f"Distribution(n={len(self)}, dtype={self._values.dtype})"

    @property
    def values(self) -> npt.NDArray[Any]:
        return self._values

    @property
    def capacity(self) -> int:
        """Number of slots in the allocation backing the values."""
        base = self._values
        while isinstance(base.base, np.ndarray):
            base = base.base
        return base.size

    def mean(self) -> float:
        return np.mean(self._values)

    def standard_error(self) -> float:
        """Bootstrap estimate of the standard error of the statistic."""
        return np.std(self._values, ddof=1)

    def confidence_interval(
        self, confidence_level: float = 0.95
    ) -> tuple[float, float]:
        """Percentile confidence interval.

        Parameters
        ----------
         confidence_level : float, optional
            Number in (0, 1). Defaults to 0.95, corresponding to a 95%
            confidence interval.

        Returns
        -------
         low, high : float
            Endpoints of the interval.

        Notes
        -----
        The endpoints are order statistics of the distribution, chosen
        as in S12.5 of [ET93]. If the distribution is too small for the
        requested level, the endpoints are clamped to the smallest and
        largest values, with a warning.

        """
        if confidence_level <= 0 or confidence_level >= 1:
            raise ValueError(f"Invalid confidence_level: {confidence_level}")

        alpha = (1 - confidence_level) / 2
        low, high = _percentile(self._values, [alpha, 1 - alpha])
        return low, high

    def p_value(self, t: float, tails: Literal["one", "two"] = "two") -> float:
        """Achieved significance level of `t`.

        Parameters
        ----------
         t : float
            Observed value of the test statistic.
         tails : ["one", "two"], optional
            Whether to compute a one- or two-sided value. Defaults to
            "two".

        Returns
        -------
         p : float
            Fraction of the distribution on the smaller side of `t`,
            doubled for a two-sided value.

        """
        if tails == "one":
            factor = 1
        elif tails == "two":
            factor = 2
        else:
            raise ValueError(f"Invalid tails: {tails}")

        n = len(self._values)
        hits = int((self._values < t).sum())
        return factor * min(hits, n - hits) / n
