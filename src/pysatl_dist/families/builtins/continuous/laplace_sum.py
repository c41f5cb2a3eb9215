"""
Sum of IID Laplace variables.

:class:`LaplaceSumDistribution` evaluates the exact density of a sum of
Laplace variables from its finite series expansion and tabulates the CDF
numerically.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import gammaln

from pysatl_dist.distributions.numerical import NumericalRealDistribution
from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ParameterError

if TYPE_CHECKING:
    from pysatl_dist.distributions.numerical import NumericalSettings
    from pysatl_dist.families.builtins.continuous.laplace import LaplaceDistribution
    from pysatl_dist.types import NumericArray

_SMALL_Z = 1.0e-04
"""Below this standardized distance from the mean the density takes its limiting value."""


def _log_factorial(k: NumericArray | int) -> NumericArray:
    return gammaln(np.asarray(k, dtype=float) + 1.0)


class LaplaceSumDistribution(NumericalRealDistribution):
    """
    Distribution of the sum of ``count`` IID Laplace variables.

    With ``z = |x - mean| / b`` for the parent scale ``b`` the density is

        p(z) = exp(-z) * Σ_j c_j z^(n-1-j),   j = 0, ..., n-1

    where the coefficients (Kotz, Kozubowski and Podgorski, eq. 2.3.25)

        c_j = (n-1+j)! / ((n-1)! (n-1-j)! j! 2^(n+j))

    are assembled in log space. As ``z -> 0`` the density tends to
    ``Γ(n - 1/2) / (2 Γ(n) √π)``.

    Parameters
    ----------
    parent : LaplaceDistribution
        Distribution of each summed variable.
    count : int
        Number of summed variables; must be positive.
    settings : NumericalSettings, optional
        Quadrature settings of the tabulated CDF.
    """

    __slots__ = ("_parent", "_count", "_mean", "_sdev", "_small_z", "_coeffs")

    def __init__(
        self, parent: LaplaceDistribution, count: int, settings: NumericalSettings | None = None
    ):
        if count < 1:
            raise ParameterError("Count must be positive.", "count", count)
        super().__init__(settings)

        self._parent = parent
        self._count = int(count)
        self._mean = count * parent.mean()
        self._sdev = math.sqrt(count) * parent.sdev()

        n = self._count
        self._small_z = math.exp(
            math.lgamma(n - 0.5) - math.lgamma(n) - math.log(2.0 * math.sqrt(math.pi))
        )

        j = np.arange(n)
        log_c = (
            _log_factorial(n - 1 + j)
            - _log_factorial(n - 1)
            - _log_factorial(n - 1 - j)
            - _log_factorial(j)
            - (n + j) * math.log(2.0)
        )
        self._coeffs = np.exp(log_c)

    @property
    def parent(self) -> LaplaceDistribution:
        return self._parent

    @property
    def count(self) -> int:
        return self._count

    @property
    def parameters(self) -> dict[str, float]:
        return {
            "location": self._parent.location,
            "scale": self._parent.scale,
            "count": self._count,
        }

    @property
    def support(self) -> RealInterval:
        return RealInterval.INFINITE

    def mean(self) -> float:
        return self._mean

    def median(self) -> float:
        return self._mean

    def mode(self) -> float:
        return self._mean

    def sdev(self) -> float:
        return self._sdev

    def _pdf(self, x: NumericArray) -> NumericArray:
        b = self._parent.scale
        z = np.abs(x - self._mean) / b
        return self._pdfz(z) / b

    def _pdfz(self, z: NumericArray) -> NumericArray:
        powers = self._count - 1 - np.arange(self._count)
        series = np.power.outer(z, powers) @ self._coeffs
        return np.where(z < _SMALL_Z, self._small_z, series * np.exp(-z))

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        draws = self._parent.sample(rng, size * self._count)
        return draws.reshape(size, self._count).sum(axis=1)


__all__ = ["LaplaceSumDistribution"]
