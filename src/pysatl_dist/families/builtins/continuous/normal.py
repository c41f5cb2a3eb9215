"""
Normal distribution family implementation.

Contains :class:`NormalDistribution` and the Normal family with the
``meanStd`` and ``meanPrec`` parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, ClassVar, cast

import numpy as np
from scipy.special import erf, erfinv

from pysatl_dist.distributions.distribution import (
    RealDistribution,
    score_z,
    validate_quantile,
    validate_sdev,
)
from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ParameterError
from pysatl_dist.families.parametric_family import ParametricFamily
from pysatl_dist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_dist.families.registry import ParametricFamilyRegister
from pysatl_dist.types import FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_dist.types import NumericArray

_SQRT2 = math.sqrt(2.0)
_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


class NormalDistribution(RealDistribution):
    """
    Normal (Gaussian) distribution.

    The normal distribution is symmetric about its mean and defined by two
    parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mean : float
        Mean of the distribution.
    sdev : float
        Standard deviation of the distribution; must be positive.

    Raises
    ------
    ParameterError
        If ``sdev`` is not positive.
    """

    STANDARD: ClassVar[NormalDistribution]

    __slots__ = ("_mean", "_sdev")

    def __init__(self, mean: float = 0.0, sdev: float = 1.0):
        validate_sdev(sdev)
        self._mean = float(mean)
        self._sdev = float(sdev)

    @property
    def parameters(self) -> dict[str, float]:
        return {"mean": self._mean, "sdev": self._sdev}

    @staticmethod
    def cdf_of(x: float, mean: float, sdev: float) -> float:
        """CDF of the normal distribution with the given moments."""
        z = score_z(x, mean, sdev)
        return float(0.5 * (1.0 + erf(z / _SQRT2)))

    @staticmethod
    def pdf_of(x: float, mean: float, sdev: float) -> float:
        """PDF of the normal distribution with the given moments."""
        z = score_z(x, mean, sdev)
        return math.exp(-0.5 * z * z) / (sdev * _SQRT_TWO_PI)

    @staticmethod
    def quantile_of(F: float, mean: float, sdev: float) -> float:
        """Quantile of the normal distribution with the given moments."""
        validate_sdev(sdev)
        validate_quantile(F)
        return mean + _SQRT2 * sdev * float(erfinv(2.0 * F - 1.0))

    @staticmethod
    def sum_of(count: int, mean: float, sdev: float) -> NormalDistribution:
        """
        Exact distribution of the sum of ``count`` IID normal variables.

        Raises
        ------
        ParameterError
            If ``count`` is not positive.
        """
        if count < 1:
            raise ParameterError("Variable count must be positive.", "count", count)
        return NormalDistribution(count * mean, math.sqrt(count) * sdev)

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

    def _cdf(self, x: NumericArray) -> NumericArray:
        z = (x - self._mean) / self._sdev
        return cast("NumericArray", 0.5 * (1.0 + erf(z / _SQRT2)))

    def _pdf(self, x: NumericArray) -> NumericArray:
        z = (x - self._mean) / self._sdev
        return cast("NumericArray", np.exp(-0.5 * z * z) / (self._sdev * _SQRT_TWO_PI))

    def _quantile(self, F: NumericArray) -> NumericArray:
        return cast("NumericArray", self._mean + _SQRT2 * self._sdev * erfinv(2.0 * F - 1.0))

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        return rng.normal(self._mean, self._sdev, size)

    def sum(self, count: int, rng: np.random.Generator | None = None) -> NormalDistribution:
        """Exact sum distribution; ``rng`` is accepted for interface compatibility."""
        if count == 1:
            return self
        return NormalDistribution.sum_of(count, self._mean, self._sdev)


NormalDistribution.STANDARD = NormalDistribution(0.0, 1.0)


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    def _build(parameters: Parametrization) -> NormalDistribution:
        parameters = cast(_MeanStd, parameters)
        return NormalDistribution(parameters.mu, parameters.sigma)

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["meanStd", "meanPrec"],
        factory=_build,
    )
    Normal.__doc__ = NormalDistribution.__doc__

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            sigma = math.sqrt(1 / self.tau)
            return _MeanStd(mu=self.mu, sigma=sigma)

    ParametricFamilyRegister.register(Normal)


__all__ = ["NormalDistribution", "configure_normal_family"]
