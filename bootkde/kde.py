# pyre-unsafe
"""Kernel density estimation.

References
----------
[Sil86]: Bernard W. Silverman, "Density Estimation for Statistics and
         Data Analysis". Chapman & Hall, 1986.

"""

from abc import ABC, abstractmethod
from itertools import chain
from typing import Any

import numpy as np
import numpy.typing as npt

from bootkde._utils import ArrayLike, _lane_width, _num_threads, _split_lanes
from bootkde.kernel import Gaussian, Kernel
from bootkde.parallel import divide
from bootkde.sample import Sample


class Bandwidth(ABC):
    """Method to choose the bandwidth of a Kde."""

    @abstractmethod
    def estimate(self, sample: Sample) -> np.floating[Any]:
        raise NotImplementedError


class Manual(Bandwidth):
    """Use a given value as the bandwidth."""

    def __init__(self, value: float) -> None:
        if not value > 0:
            raise ValueError(f"Invalid bandwidth: {value}")
        self.value = value

    def estimate(self, sample: Sample) -> np.floating[Any]:
        return sample.dtype.type(self.value)

    def __repr__(self) -> str:
        return f"Manual({self.value})"


class Silverman(Bandwidth):
    r"""Silverman's rule of thumb.

    .. math::

       h = \hat{\sigma} \left(\frac{4}{3 n}\right)^{1/5}

    where :math:`\hat{\sigma}` is the sample standard deviation. This
    is optimal for normally distributed data with a Gaussian kernel
    [Sil86, S3.4.2].

    """

    def estimate(self, sample: Sample) -> np.floating[Any]:
        n = len(sample)
        sigma = sample.std_dev()
        factor = (4.0 / (3.0 * n)) ** 0.2
        return sample.dtype.type(sigma * factor)

    def __repr__(self) -> str:
        return "Silverman()"


def _as_bandwidth(bw: Bandwidth | float | str) -> Bandwidth:
    if isinstance(bw, Bandwidth):
        return bw
    if isinstance(bw, str):
        if bw.lower() == "silverman":
            return Silverman()
        raise ValueError(f"Unknown bandwidth method: {bw}")
    return Manual(bw)


class Kde:
    """Univariate kernel density estimator.

    Parameters
    ----------
     sample : Sample or array_like
        The data.
     kernel : Kernel, optional
        The kernel. Defaults to Gaussian.
     bandwidth : Bandwidth, float or "silverman", optional
        How to choose the bandwidth. A number is used as the bandwidth
        directly. Defaults to Silverman's rule of thumb.

    Notes
    -----
    The bandwidth is estimated once, when the estimator is created.
    Afterwards the estimator is read-only and can be evaluated from
    several threads at once.

    Examples
    --------
    >>> kde = Kde([1.0, 2.0, 3.0, 4.0, 5.0])
    >>> ys = kde.map([1.0, 3.0, 5.0])
    >>> bool(ys[1] > ys[0])
    True

    """

    sample: Sample
    kernel: Kernel

    def __init__(
        self,
        sample: Sample | ArrayLike,
        kernel: Kernel | None = None,
        bandwidth: Bandwidth | float | str = "silverman",
    ) -> None:
        if not isinstance(sample, Sample):
            sample = Sample(sample)

        self.sample = sample
        self.kernel = Gaussian() if kernel is None else kernel
        self._bandwidth = _as_bandwidth(bandwidth).estimate(sample)

    @property
    def bandwidth(self) -> np.floating[Any]:
        return self._bandwidth

    def __call__(self, x: float) -> np.floating[Any]:
        return self.evaluate(x)

    def evaluate(self, x: float) -> np.floating[Any]:
        """Estimated probability density at `x`.

        The sample is processed a full vector register at a time, with
        one running sum per lane; the elements left over at either end
        are added one at a time.

        """
        data = self.sample.data
        dtype = data.dtype
        x = dtype.type(x)
        h = self._bandwidth
        kernel = self.kernel

        head, body, tail = _split_lanes(data, _lane_width(dtype))

        lanes = kernel((x - body) / h).sum(axis=0)
        acc = lanes.sum(dtype=dtype)

        for x_i in chain(head, tail):
            acc += kernel((x - x_i) / h)

        return acc / h / dtype.type(len(data))

    def map(
        self, xs: ArrayLike, num_threads: int = -1
    ) -> npt.NDArray[np.floating[Any]]:
        """Evaluate the estimator at many points.

        Parameters
        ----------
         xs : array_like
            One dimensional array of points.
         num_threads : int, optional
            Number of threads to use. Defaults to -1, meaning all
            available cores.

        Returns
        -------
         ys : ndarray
            `ys[i]` is the estimated density at `xs[i]`.

        """
        xs = np.asarray(xs, dtype=self.sample.dtype)
        if xs.ndim != 1:
            raise ValueError(f"Expected one dimensional points, got {xs.ndim}")

        n = len(xs)
        num_threads = _num_threads(num_threads)
        ys = np.empty((n,), dtype=xs.dtype)

        # TODO pick a threshold from the sample size too; tiny samples
        # are faster single-threaded even for many points.
        if num_threads > 1 and n > num_threads:
            granularity = n // num_threads + 1

            def _evaluate(chunk, offset):
                for i in range(len(chunk)):
                    chunk[i] = self.evaluate(xs[offset + i])

            divide(ys, granularity, _evaluate, num_threads=num_threads)
        else:
            for i, x in enumerate(xs):
                ys[i] = self.evaluate(x)

        return ys
