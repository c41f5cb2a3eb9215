"""
Exponential distribution family implementation.

Contains :class:`ExponentialDistribution` and the Exponential family with
rate and scale parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, ClassVar, cast

import numpy as np

from pysatl_dist.distributions.distribution import RealDistribution, validate_quantile
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


def _validate_rate(rate: float) -> None:
    if not rate > 0.0:
        raise ParameterError("Non-positive rate parameter.", "rate", rate)


class ExponentialDistribution(RealDistribution):
    """
    Exponential distribution.

    Describes the time between events in a Poisson process with rate λ.

    Probability density function:
        f(x) = λ * exp(-λ * x) for x ≥ 0

    Parameters
    ----------
    rate : float
        Rate parameter (λ); must be positive.

    Notes
    -----
    The CDF and PDF vanish for negative arguments.
    """

    UNIT: ClassVar[ExponentialDistribution]

    __slots__ = ("_rate",)

    def __init__(self, rate: float = 1.0):
        _validate_rate(rate)
        self._rate = float(rate)

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def parameters(self) -> dict[str, float]:
        return {"rate": self._rate}

    @staticmethod
    def cdf_of(x: float, rate: float) -> float:
        _validate_rate(rate)
        return 1.0 - math.exp(-rate * x) if x >= 0.0 else 0.0

    @staticmethod
    def pdf_of(x: float, rate: float) -> float:
        _validate_rate(rate)
        return rate * math.exp(-rate * x) if x >= 0.0 else 0.0

    @staticmethod
    def quantile_of(F: float, rate: float) -> float:
        _validate_rate(rate)
        validate_quantile(F)
        return -math.log1p(-F) / rate if F < 1.0 else math.inf

    @property
    def support(self) -> RealInterval:
        return RealInterval.NON_NEGATIVE

    def mean(self) -> float:
        return 1.0 / self._rate

    def median(self) -> float:
        return math.log(2.0) / self._rate

    def mode(self) -> float:
        return 0.0

    def sdev(self) -> float:
        return 1.0 / self._rate

    def _cdf(self, x: NumericArray) -> NumericArray:
        return np.where(x >= 0, -np.expm1(-self._rate * np.maximum(x, 0.0)), 0.0)

    def _pdf(self, x: NumericArray) -> NumericArray:
        return np.where(x >= 0, self._rate * np.exp(-self._rate * np.maximum(x, 0.0)), 0.0)

    def _quantile(self, F: NumericArray) -> NumericArray:
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.where(F < 1.0, -np.log1p(-F) / self._rate, np.inf)

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        return rng.exponential(1.0 / self._rate, size)


ExponentialDistribution.UNIT = ExponentialDistribution(1.0)


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    def _build(parameters: Parametrization) -> ExponentialDistribution:
        parameters = cast(_Rate, parameters)
        return ExponentialDistribution(parameters.lambda_)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["rate", "scale"],
        factory=_build,
    )
    Exponential.__doc__ = ExponentialDistribution.__doc__

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ) of the distribution
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(Exponential)


__all__ = ["ExponentialDistribution", "configure_exponential_family"]
