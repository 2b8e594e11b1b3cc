# pyre-unsafe
"""Bootstrap distributions and kernel density estimation.

This package builds bootstrap distributions of statistics computed on
measurement samples, such as benchmark timings, for one sample or for a
pair of samples, and estimates the probability density of a sample with
a kernel density estimator. Both resampling and density evaluation can
be spread over several threads.

References
----------
[ET93]:  Bradley Efron and Robert J. Tibshirani, "An Introduction to the
         Bootstrap". Chapman & Hall, 1993.
[Sil86]: Bernard W. Silverman, "Density Estimation for Statistics and
         Data Analysis". Chapman & Hall, 1986.

"""

# Type aliases (public)
from bootkde._utils import ArrayLike, Statistic, TwoSampleStatistic

# Bootstrap distributions
from bootkde.distributions import Distribution

# Kernel density estimation
from bootkde.kde import Bandwidth, Kde, Manual, Silverman
from bootkde.kernel import Epanechnikov, Gaussian, Kernel, Triangular

# Parallel execution
from bootkde.parallel import divide

# Resampling
from bootkde.resamples import Resamples
from bootkde.sample import Sample
from bootkde.sampling import bootstrap, bootstrap2

__all__ = [
    # Type aliases
    "ArrayLike",
    "Statistic",
    "TwoSampleStatistic",
    # Data
    "Sample",
    "Distribution",
    # Resampling
    "Resamples",
    "bootstrap",
    "bootstrap2",
    # Parallel execution
    "divide",
    # Kernel density estimation
    "Bandwidth",
    "Manual",
    "Silverman",
    "Kde",
    "Kernel",
    "Gaussian",
    "Epanechnikov",
    "Triangular",
]
