"""
Triangular distribution family implementation.

Contains :class:`TriangularDistribution` and the Triangular family.
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


class TriangularDistribution(RealDistribution):
    """
    Triangular distribution on ``[A, B]`` with mode ``C``.

    The density rises linearly from 0 at ``A`` to its peak ``2 / (B - A)``
    at ``C`` and falls linearly back to 0 at ``B``.

    Parameters
    ----------
    lower : float
        Lower bound ``A``.
    upper : float
        Upper bound ``B``.
    mode : float
        Peak position ``C``; must lie in ``[A, B]``.

    Raises
    ------
    ParameterError
        If the support is not finite with positive width or does not
        contain the mode.
    """

    KERNEL: ClassVar[TriangularDistribution]

    __slots__ = (
        "_A",
        "_B",
        "_C",
        "_support",
        "_mean",
        "_sdev",
        "_median",
        "_fac1",
        "_fac2",
        "_fac3",
    )

    def __init__(self, lower: float, upper: float, mode: float):
        support = RealInterval.closed(lower, upper)
        if not (math.isfinite(support.width) and support.width > 0.0):
            raise ParameterError("Support interval must be finite.", "support", str(support))
        if not support.contains(mode):
            raise ParameterError("Support interval must contain the mode.", "mode", mode)

        A, B, C = support.lower, support.upper, float(mode)
        self._A, self._B, self._C = A, B, C
        self._support = support

        self._mean = (A + B + C) / 3.0
        self._sdev = math.sqrt((A * A + B * B + C * C - A * B - A * C - B * C) / 18.0)

        if C >= support.midpoint:
            self._median = A + math.sqrt(0.5 * (B - A) * (C - A))
        else:
            self._median = B - math.sqrt(0.5 * (B - A) * (B - C))

        # Factors in the PDF and CDF
        self._fac1 = (B - A) * (C - A)
        self._fac2 = (B - A) * (B - C)
        self._fac3 = (C - A) / (B - A)

    @property
    def parameters(self) -> dict[str, float]:
        return {"lower": self._A, "upper": self._B, "mode": self._C}

    @property
    def support(self) -> RealInterval:
        return self._support

    def mean(self) -> float:
        return self._mean

    def median(self) -> float:
        return self._median

    def mode(self) -> float:
        return self._C

    def sdev(self) -> float:
        return self._sdev

    def _cdf(self, x: NumericArray) -> NumericArray:
        A, B, C = self._A, self._B, self._C
        rising = (x > A) & (x < C)
        falling = (x >= C) & (x < B)
        result = np.where(x >= B, 1.0, 0.0)
        result[rising] = (x[rising] - A) ** 2 / self._fac1
        result[falling] = 1.0 - (B - x[falling]) ** 2 / self._fac2
        return result

    def _pdf(self, x: NumericArray) -> NumericArray:
        A, B, C = self._A, self._B, self._C
        rising = (x > A) & (x < C)
        falling = (x >= C) & (x < B)
        result = np.zeros_like(x, dtype=float)
        result[rising] = 2.0 * (x[rising] - A) / self._fac1
        result[falling] = 2.0 * (B - x[falling]) / self._fac2
        return result

    def _quantile(self, F: NumericArray) -> NumericArray:
        return np.where(
            F < self._fac3,
            self._A + np.sqrt(self._fac1 * F),
            self._B - np.sqrt(self._fac2 * (1.0 - F)),
        )


TriangularDistribution.KERNEL = TriangularDistribution(-1.0, 1.0, 0.0)


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return

    def _build(parameters: Parametrization) -> TriangularDistribution:
        parameters = cast(_Standard, parameters)
        return TriangularDistribution(parameters.lower, parameters.upper, parameters.mode)

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["standard"],
        factory=_build,
    )
    Triangular.__doc__ = TriangularDistribution.__doc__

    @parametrization(family=Triangular, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of triangular distribution.

        Parameters
        ----------
        lower : float
            Lower bound of the support
        upper : float
            Upper bound of the support
        mode : float
            Peak position
        """

        lower: float
        upper: float
        mode: float

        @constraint(description="lower < upper")
        def check_lower_less_than_upper(self) -> bool:
            return self.lower < self.upper

        @constraint(description="lower <= mode <= upper")
        def check_mode_in_support(self) -> bool:
            return self.lower <= self.mode <= self.upper

    ParametricFamilyRegister.register(Triangular)


__all__ = ["TriangularDistribution", "configure_triangular_family"]
