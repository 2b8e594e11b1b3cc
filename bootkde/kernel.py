# pyre-unsafe
"""Kernels for kernel density estimation."""

import math
from abc import ABC, abstractmethod

import numpy as np

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


class Kernel(ABC):
    """Symmetric probability kernel.

    Subclasses implement `evaluate`, which must accept numpy scalars as
    well as arrays, apply elementwise, and keep the floating point
    precision of its input.

    """

    @abstractmethod
    def evaluate(self, x):
        raise NotImplementedError

    def __call__(self, x):
        return self.evaluate(x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Gaussian(Kernel):
    """Standard normal density."""

    def evaluate(self, x):
        return np.exp(-0.5 * x * x) * _INV_SQRT_2PI


class Epanechnikov(Kernel):
    """3/4 (1 - x^2) on [-1, 1]."""

    def evaluate(self, x):
        return np.where(np.abs(x) <= 1.0, 0.75 * (1.0 - x * x), 0.0)


class Triangular(Kernel):
    """1 - |x| on [-1, 1]."""

    def evaluate(self, x):
        return np.maximum(1.0 - np.abs(x), 0.0)
