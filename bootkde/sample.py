# pyre-unsafe
"""Read-only view over a sample of observations."""

from typing import Any

import numpy as np
import numpy.typing as npt
import pandas as pd
import scipy.stats as ss

from bootkde._utils import ArrayLike


class Sample:
    r"""Sample

    An immutable view over a finite, ordered sequence of floating
    point observations.

    Parameters
    ----------
     data : array_like, pandas Series or single-column DataFrame
        The observations. Floating point arrays (single or double
        precision) are used without copying; anything else is
        converted to double precision.

    Notes
    -----
    The Sample does not own its data: changes the caller makes to the
    underlying array are visible through the Sample, but the Sample
    itself can never be used to modify it.

    """

    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: ArrayLike) -> None:
        if isinstance(data, pd.DataFrame):
            if len(data.columns) != 1:
                raise ValueError(
                    f"Expected a single column, got {len(data.columns)}"
                )
            data = data.iloc[:, 0]

        x = np.asarray(data)
        if x.ndim != 1:
            raise ValueError(f"Expected one dimensional data, got {x.ndim}")

        if not np.issubdtype(x.dtype, np.floating):
            x = x.astype(np.float64)

        x = np.ascontiguousarray(x).view()
        x.flags.writeable = False
        self.data = x

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, key):
        return self.data[key]

    def __array__(self, dtype=None, copy=None):
        if dtype is not None and np.dtype(dtype) != self.data.dtype:
            if copy is False:
                raise ValueError(f"Converting to {np.dtype(dtype)} requires a copy")
            return self.data.astype(dtype)
        if copy:
            return self.data.copy()
        return self.data

    def __repr__(self) -> str:
        return f"Sample(n={len(self)}, dtype={self.dtype})"

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def mean(self) -> np.floating[Any]:
        return self.data.mean()

    def var(self, mean: float | None = None) -> np.floating[Any]:
        """Sample variance.

        Parameters
        ----------
         mean : float, optional
            The mean of the sample, if it has already been calculated.

        Returns
        -------
         var : float
            Unbiased estimate of the variance (n - 1 in the
            denominator).

        """
        if mean is None:
            mean = self.mean()

        d = self.data - mean
        return d.dot(d) / self.dtype.type(len(self) - 1)

    def std_dev(self, mean: float | None = None) -> np.floating[Any]:
        """Sample standard deviation. See `var`."""
        return np.sqrt(self.var(mean))

    def min(self) -> np.floating[Any]:
        return self.data.min()

    def max(self) -> np.floating[Any]:
        return self.data.max()

    def median(self) -> np.floating[Any]:
        return self.dtype.type(np.median(self.data))

    def median_abs_dev(self) -> np.floating[Any]:
        """Median absolute deviation.

        Scaled by 1.4826 so that it estimates the standard deviation
        for normally distributed data.

        """
        mad = ss.median_abs_deviation(self.data, scale="normal")
        return self.dtype.type(mad)
