"""
Log-normal distribution family implementation.

Contains :class:`LogNormalDistribution` and the LogNormal family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf, erfinv

from pysatl_dist.distributions.distribution import RealDistribution, validate_sdev
from pysatl_dist.distributions.support import RealInterval
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


class LogNormalDistribution(RealDistribution):
    """
    Log-normal distribution: ``exp(Y)`` for ``Y ~ Normal(mu, sigma)``.

    Parameters
    ----------
    mu : float
        Mean of the underlying normal distribution.
    sigma : float
        Standard deviation of the underlying normal distribution; must be
        positive.
    """

    __slots__ = ("_mu", "_sigma", "_mean", "_mode", "_median", "_variance", "_Q", "_P1", "_P2")

    def __init__(self, mu: float, sigma: float):
        validate_sdev(sigma)
        self._mu = float(mu)
        self._sigma = float(sigma)

        sigma2 = self._sigma * self._sigma
        self._mean = math.exp(self._mu + 0.5 * sigma2)
        self._mode = math.exp(self._mu - sigma2)
        self._median = math.exp(self._mu)
        self._variance = math.expm1(sigma2) * math.exp(2.0 * self._mu + sigma2)

        # Constants of the quantile and density
        self._Q = self._sigma * math.sqrt(2.0)
        self._P1 = 1.0 / (self._sigma * math.sqrt(2.0 * math.pi))
        self._P2 = -0.5 / sigma2

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def sigma(self) -> float:
        return self._sigma

    @property
    def parameters(self) -> dict[str, float]:
        return {"mu": self._mu, "sigma": self._sigma}

    @property
    def support(self) -> RealInterval:
        return RealInterval.POSITIVE

    def mean(self) -> float:
        return self._mean

    def median(self) -> float:
        return self._median

    def mode(self) -> float:
        return self._mode

    def sdev(self) -> float:
        return math.sqrt(self._variance)

    def variance(self) -> float:
        return self._variance

    def _cdf(self, x: NumericArray) -> NumericArray:
        positive = x > 0.0
        result = np.zeros_like(x, dtype=float)
        result[positive] = 0.5 * (1.0 + erf((np.log(x[positive]) - self._mu) / self._Q))
        return result

    def _pdf(self, x: NumericArray) -> NumericArray:
        positive = x > 0.0
        result = np.zeros_like(x, dtype=float)
        y = np.log(x[positive]) - self._mu
        result[positive] = self._P1 * np.exp(self._P2 * y * y) / x[positive]
        return result

    def _quantile(self, F: NumericArray) -> NumericArray:
        return cast("NumericArray", np.exp(self._mu + self._Q * erfinv(2.0 * F - 1.0)))

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        return np.exp(rng.normal(self._mu, self._sigma, size))


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    def _build(parameters: Parametrization) -> LogNormalDistribution:
        parameters = cast(_Standard, parameters)
        return LogNormalDistribution(parameters.mu, parameters.sigma)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["standard"],
        factory=_build,
    )
    LogNormal.__doc__ = LogNormalDistribution.__doc__

    @parametrization(family=LogNormal, name="standard")
    class _Standard(Parametrization):
        """
        Parametrization by the moments of the underlying normal distribution.

        Parameters
        ----------
        mu : float
            Mean of log(X)
        sigma : float
            Standard deviation of log(X)
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(LogNormal)


__all__ = ["LogNormalDistribution", "configure_lognormal_family"]
