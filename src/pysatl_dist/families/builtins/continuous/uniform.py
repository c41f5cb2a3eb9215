"""
Uniform distribution family implementation.

Contains :class:`UniformDistribution` and the ContinuousUniform family with
the ``standard`` and ``meanWidth`` parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, ClassVar, cast

import numpy as np

from pysatl_dist.distributions.distribution import RealDistribution
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


class UniformDistribution(RealDistribution):
    """
    Continuous uniform distribution over a finite interval.

    Probability density function:
        f(x) = 1 / (b - a) for a ≤ x ≤ b

    Parameters
    ----------
    lower : float
        Lower bound of the support.
    upper : float
        Upper bound of the support.

    Raises
    ------
    ParameterError
        Unless the support has finite, positive width.

    Notes
    -----
    The mode is reported as ``nan`` because every point of the support is
    equally likely.
    """

    KERNEL: ClassVar[UniformDistribution]

    __slots__ = ("_support", "_density")

    def __init__(self, lower: float, upper: float):
        self._init_support(RealInterval.closed(lower, upper))

    @classmethod
    def over(cls, support: RealInterval) -> UniformDistribution:
        """Uniform distribution over an existing support interval."""
        distr = cls.__new__(cls)
        distr._init_support(support)
        return distr

    def _init_support(self, support: RealInterval) -> None:
        width = support.width
        if not (math.isfinite(width) and width > 0.0):
            raise ParameterError("Support interval must be finite.", "support", str(support))
        self._support = support
        self._density = 1.0 / width

    @property
    def parameters(self) -> dict[str, float]:
        return {"lower": self._support.lower, "upper": self._support.upper}

    @property
    def support(self) -> RealInterval:
        return self._support

    @property
    def density(self) -> float:
        """Constant density ``1 / width`` over the support."""
        return self._density

    def mean(self) -> float:
        return self._support.midpoint

    def median(self) -> float:
        return self._support.midpoint

    def mode(self) -> float:
        return math.nan

    def sdev(self) -> float:
        return self._support.width / math.sqrt(12.0)

    def _cdf(self, x: NumericArray) -> NumericArray:
        lower = self._support.lower
        return np.clip(self._density * (x - lower), 0.0, 1.0)

    def _pdf(self, x: NumericArray) -> NumericArray:
        lower, upper = self._support.lower, self._support.upper
        return np.where((lower <= x) & (x <= upper), self._density, 0.0)

    def _quantile(self, F: NumericArray) -> NumericArray:
        return self._support.lower + F * self._support.width

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        return rng.uniform(self._support.lower, self._support.upper, size)


UniformDistribution.KERNEL = UniformDistribution(-1.0, 1.0)


def configure_uniform_family() -> None:
    """
    Configure and register the ContinuousUniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    def _build(parameters: Parametrization) -> UniformDistribution:
        parameters = cast(_Standard, parameters)
        return UniformDistribution(parameters.lower_bound, parameters.upper_bound)

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["standard", "meanWidth"],
        factory=_build,
    )
    Uniform.__doc__ = UniformDistribution.__doc__

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower_bound : float
            Lower bound of the distribution
        upper_bound : float
            Upper bound of the distribution
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="lower_bound < upper_bound")
        def check_lower_less_than_upper(self) -> bool:
            return self.lower_bound < self.upper_bound

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (upper_bound - lower_bound)
        """

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half_width = self.width / 2
            return _Standard(lower_bound=self.mean - half_width, upper_bound=self.mean + half_width)

    ParametricFamilyRegister.register(Uniform)


__all__ = ["UniformDistribution", "configure_uniform_family"]
