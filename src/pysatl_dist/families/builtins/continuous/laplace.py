"""
Laplace distribution family implementation.

Contains :class:`LaplaceDistribution` and the Laplace family with the
``native`` and ``sdev`` scale parametrizations.
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
from pysatl_dist.types import FamilyName, Kind, ScaleType

if TYPE_CHECKING:
    from pysatl_dist.types import NumericArray

_SQRT2 = math.sqrt(2.0)


def _validate_scale(scale: float) -> None:
    if not scale > 0.0:
        raise ParameterError("Non-positive scale parameter.", "scale", scale)


def _resolve_scale(width: float, scale_type: ScaleType) -> float:
    match ScaleType(scale_type):
        case ScaleType.NATIVE:
            return width
        case ScaleType.SDEV:
            return width / _SQRT2


class LaplaceDistribution(RealDistribution):
    """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = exp(-|x - μ| / b) / (2b)

    Parameters
    ----------
    location : float
        Location (μ), which is the mean, median and mode.
    scale : float
        Width of the distribution; must be positive.
    scale_type : ScaleType, default ScaleType.NATIVE
        Whether ``scale`` is the native scale ``b`` or the standard
        deviation ``√2 b``.
    """

    UNIT: ClassVar[LaplaceDistribution]

    __slots__ = ("_location", "_scale")

    def __init__(
        self, location: float = 0.0, scale: float = 1.0, scale_type: ScaleType = ScaleType.NATIVE
    ):
        _validate_scale(scale)
        self._location = float(location)
        self._scale = float(_resolve_scale(scale, scale_type))

    @property
    def location(self) -> float:
        return self._location

    @property
    def scale(self) -> float:
        """The native scale ``b``."""
        return self._scale

    @property
    def parameters(self) -> dict[str, float]:
        return {"location": self._location, "scale": self._scale}

    @staticmethod
    def cdf_of(x: float, mu: float, b: float) -> float:
        _validate_scale(b)
        if x < mu:
            return 0.5 * math.exp((x - mu) / b)
        return 1.0 - 0.5 * math.exp((mu - x) / b)

    @staticmethod
    def pdf_of(x: float, mu: float, b: float) -> float:
        _validate_scale(b)
        return math.exp(-abs(x - mu) / b) / (2.0 * b)

    @staticmethod
    def quantile_of(F: float, mu: float, b: float) -> float:
        _validate_scale(b)
        validate_quantile(F)
        if F < 0.5:
            return mu + b * math.log(2.0 * F) if F > 0.0 else -math.inf
        return mu - b * math.log(2.0 - 2.0 * F) if F < 1.0 else math.inf

    @property
    def support(self) -> RealInterval:
        return RealInterval.INFINITE

    def mean(self) -> float:
        return self._location

    def median(self) -> float:
        return self._location

    def mode(self) -> float:
        return self._location

    def sdev(self) -> float:
        return _SQRT2 * self._scale

    def variance(self) -> float:
        return 2.0 * self._scale * self._scale

    def _cdf(self, x: NumericArray) -> NumericArray:
        mu, b = self._location, self._scale
        lower = 0.5 * np.exp(np.minimum(x - mu, 0.0) / b)
        upper = 1.0 - 0.5 * np.exp(np.minimum(mu - x, 0.0) / b)
        return np.where(x < mu, lower, upper)

    def _pdf(self, x: NumericArray) -> NumericArray:
        b = self._scale
        return cast("NumericArray", np.exp(-np.abs(x - self._location) / b) / (2.0 * b))

    def _quantile(self, F: NumericArray) -> NumericArray:
        mu, b = self._location, self._scale
        with np.errstate(divide="ignore"):
            lower = mu + b * np.log(2.0 * F)
            upper = mu - b * np.log(2.0 - 2.0 * F)
        return np.where(F < 0.5, lower, upper)

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        unif = rng.uniform(-0.5, 0.5, size)
        mu, b = self._location, self._scale
        with np.errstate(divide="ignore"):
            lower = mu + b * np.log1p(2.0 * unif)
            upper = mu - b * np.log1p(-2.0 * unif)
        return np.where(unif < 0.0, lower, upper)

    def sum(self, count: int, rng: np.random.Generator | None = None) -> RealDistribution:
        """
        Distribution of the sum of ``count`` IID Laplace variables.

        Returns ``self`` for one variable, the exact series-expansion
        :class:`LaplaceSumDistribution` below the normal threshold and the
        normal approximation at or above it. ``rng`` is not used.

        Raises
        ------
        ParameterError
            If ``count`` is not positive.
        """
        from pysatl_dist.distributions.algebra import NORMAL_SUM_THRESHOLD
        from pysatl_dist.families.builtins.continuous.laplace_sum import LaplaceSumDistribution
        from pysatl_dist.families.builtins.continuous.normal import NormalDistribution

        if count < 1:
            raise ParameterError("Variable count must be positive.", "count", count)
        if count == 1:
            return self
        if count < NORMAL_SUM_THRESHOLD:
            return LaplaceSumDistribution(self, count)
        return NormalDistribution.sum_of(count, self.mean(), self.sdev())


LaplaceDistribution.UNIT = LaplaceDistribution(0.0, 1.0)


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    def _build(parameters: Parametrization) -> LaplaceDistribution:
        parameters = cast(_Native, parameters)
        return LaplaceDistribution(parameters.location, parameters.scale)

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=[ScaleType.NATIVE, ScaleType.SDEV],
        factory=_build,
    )
    Laplace.__doc__ = LaplaceDistribution.__doc__

    @parametrization(family=Laplace, name=ScaleType.NATIVE)
    class _Native(Parametrization):
        """
        Native parametrization of Laplace distribution.

        Parameters
        ----------
        location : float
            Location (μ) of the distribution
        scale : float
            Native scale (b) of the distribution
        """

        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    @parametrization(family=Laplace, name=ScaleType.SDEV)
    class _Sdev(Parametrization):
        """
        Standard deviation parametrization of Laplace distribution.

        Parameters
        ----------
        location : float
            Location (μ) of the distribution
        sdev : float
            Standard deviation (√2 b) of the distribution
        """

        location: float
        sdev: float

        @constraint(description="sdev > 0")
        def check_sdev_positive(self) -> bool:
            return self.sdev > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Native(location=self.location, scale=self.sdev / _SQRT2)

    ParametricFamilyRegister.register(Laplace)


__all__ = ["LaplaceDistribution", "configure_laplace_family"]
