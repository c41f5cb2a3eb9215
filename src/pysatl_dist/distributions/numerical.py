"""
Numerically Tabulated CDFs
==========================

Distributions whose density is known in closed form but whose CDF is not
derive the CDF by quadrature:

- :class:`NumericalSettings` — validated step size and tail threshold.
- :class:`NumericalCDF` — table of ``(x, F(x))`` points built outward from
  the median with Simpson's rule, interpolated by a monotone cubic spline.
- :class:`NumericalRealDistribution` — base class that builds the table on
  first use and evaluates the CDF from it.

Notes
-----
The table is computed at most once per distribution (see
:class:`~pysatl_dist.distributions.computation.LazyComputation`); it is
never mutated afterwards.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from scipy.interpolate import PchipInterpolator

from pysatl_dist.distributions.computation import LazyComputation
from pysatl_dist.distributions.distribution import RealDistribution
from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ConvergenceError
from pysatl_dist.families.parametrizations import (
    ParametrizationConstraint,
    check_constraints,
    collect_constraints,
    constraint,
)

if TYPE_CHECKING:
    from pysatl_dist.types import NumericArray

logger = logging.getLogger(__name__)

UNIT_STEP_RANGE = RealInterval.closed(1.0e-04, 0.1)
"""Valid integration steps, in units of the standard deviation."""

THRESHOLD_RANGE = RealInterval.closed(1.0e-08, 0.01)
"""Valid tail probability thresholds."""

_TABLE_HALF_WIDTH = 20.0
"""Integration never extends beyond this many standard deviations from the median."""


@dataclass(frozen=True, slots=True)
class NumericalSettings:
    """
    Settings of the numerical CDF quadrature.

    Parameters
    ----------
    unit_step : float, default 1e-2
        Integration step as a fraction of the standard deviation.
    threshold : float, default 1e-6
        Integration stops once the tail probability falls below this value.

    Raises
    ------
    ParameterError
        If either value lies outside its valid range.
    """

    unit_step: float = 1.0e-02
    threshold: float = 1.0e-06

    _constraints: ClassVar[list[ParametrizationConstraint]]

    def __post_init__(self) -> None:
        check_constraints(self, NumericalSettings._constraints)

    @constraint(description="1e-4 <= unit_step <= 0.1")
    def check_unit_step(self) -> bool:
        return UNIT_STEP_RANGE.contains(self.unit_step)

    @constraint(description="1e-8 <= threshold <= 0.01")
    def check_threshold(self) -> bool:
        return THRESHOLD_RANGE.contains(self.threshold)


NumericalSettings._constraints = collect_constraints(NumericalSettings)


class NumericalCDF:
    """
    Cumulative distribution function tabulated from a density.

    Parameters
    ----------
    x, y : NumericArray
        Sorted abscissae and the cumulative probabilities at them.

    Notes
    -----
    Use :meth:`create` to build the table from a distribution.
    """

    __slots__ = ("_x", "_y", "_spline")

    def __init__(self, x: NumericArray, y: NumericArray):
        self._x = np.asarray(x, dtype=float)
        self._y = np.asarray(y, dtype=float)
        self._spline = PchipInterpolator(self._x, self._y, extrapolate=False)

    @classmethod
    def create(
        cls, distr: RealDistribution, settings: NumericalSettings | None = None
    ) -> NumericalCDF:
        """
        Tabulate the CDF of ``distr`` by integrating its density.

        Starting from ``(median, 0.5)`` the density is integrated forward and
        backward in steps of ``unit_step * sdev`` with Simpson's rule until
        the tail probability drops below ``threshold`` or the integration
        range (the support, at most 20 standard deviations from the median)
        is exhausted. A terminal point with probability exactly 0 or 1 closes
        each tail.

        Parameters
        ----------
        distr : RealDistribution
            Distribution whose ``pdf``, ``median``, ``sdev`` and ``support``
            drive the quadrature. ``median`` must not depend on the CDF.
        settings : NumericalSettings, optional
            Step size and threshold; defaults apply when omitted.

        Returns
        -------
        NumericalCDF
            The tabulated CDF.
        """
        settings = NumericalSettings() if settings is None else settings
        return _Estimator(distr, settings).estimate()

    @property
    def x(self) -> NumericArray:
        """Tabulated abscissae (read-only view)."""
        view = self._x.view()
        view.flags.writeable = False
        return view

    @property
    def y(self) -> NumericArray:
        """Tabulated cumulative probabilities (read-only view)."""
        view = self._y.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return int(self._x.size)

    def __call__(self, x: NumericArray) -> NumericArray:
        """Evaluate the tabulated CDF; 0 below the table, 1 above it."""
        arr = np.asarray(x, dtype=float)
        inside = (arr > self._x[0]) & (arr < self._x[-1])
        result = np.where(arr <= self._x[0], 0.0, 1.0)
        if np.any(inside):
            result[inside] = np.clip(self._spline(arr[inside]), 0.0, 1.0)
        return result


class _Estimator:
    def __init__(self, distr: RealDistribution, settings: NumericalSettings):
        self.distr = distr
        self.threshold = settings.threshold

        sdev = distr.sdev()
        support = distr.support
        self.step = settings.unit_step * sdev
        self.median = distr.median()
        self.lower = max(support.lower, self.median - _TABLE_HALF_WIDTH * sdev)
        self.upper = min(support.upper, self.median + _TABLE_HALF_WIDTH * sdev)
        self.points: list[tuple[float, float]] = []

    def estimate(self) -> NumericalCDF:
        self.points.append((self.median, 0.5))
        self._integrate_forward()
        self._integrate_backward()
        self.points.sort()

        x, y = np.array(self.points, dtype=float).T
        x, first = np.unique(x, return_index=True)
        y = y[first]
        if x.size < 2:
            raise ConvergenceError(f"Numerical CDF of {self.distr!r} collapsed to a single point.")

        logger.debug(
            "Tabulated CDF of %r on [%g, %g] with %d points", self.distr, x[0], x[-1], x.size
        )
        return NumericalCDF(x, y)

    def _integrate_forward(self) -> None:
        x0 = self.median
        cdf0 = 0.5

        while True:
            x1 = x0 + self.step
            if x1 > self.upper:
                self.points.append((self.upper, 1.0))
                break

            cdf1 = cdf0 + self._simpson(x0, x1)
            self.points.append((x1, cdf1))

            if cdf1 >= 1.0 - self.threshold:
                self.points.append((x1 + self.step, 1.0))
                break

            x0 = x1
            cdf0 = cdf1

    def _integrate_backward(self) -> None:
        x1 = self.median
        cdf1 = 0.5

        while True:
            x0 = x1 - self.step
            if x0 < self.lower:
                self.points.append((self.lower, 0.0))
                break

            cdf0 = cdf1 - self._simpson(x0, x1)
            self.points.append((x0, cdf0))

            if cdf0 <= self.threshold:
                self.points.append((x0 - self.step, 0.0))
                break

            x1 = x0
            cdf1 = cdf0

    def _simpson(self, x0: float, x1: float) -> float:
        xm = 0.5 * (x0 + x1)
        p0, pm, p1 = self.distr.pdf(np.array([x0, xm, x1]))
        return (x1 - x0) * (p0 + 4.0 * pm + p1) / 6.0


class NumericalRealDistribution(RealDistribution):
    """
    Continuous distribution with a numerically tabulated CDF.

    Subclasses supply the density and moments. The CDF table is built on
    the first CDF query (directly, or through the quantile function) and
    reused afterwards. :meth:`median` is abstract: the table is built
    outward from the median, so it must not depend on the CDF.

    Parameters
    ----------
    settings : NumericalSettings, optional
        Quadrature settings; defaults apply when omitted.
    """

    __slots__ = ("_settings", "_table")

    def __init__(self, settings: NumericalSettings | None = None):
        self._settings = NumericalSettings() if settings is None else settings
        self._table: LazyComputation[NumericalCDF] = LazyComputation(
            lambda: NumericalCDF.create(self, self._settings)
        )

    @property
    def settings(self) -> NumericalSettings:
        return self._settings

    @property
    def cdf_table(self) -> NumericalCDF:
        """The tabulated CDF, computed on first access."""
        return self._table.get()

    @abstractmethod
    def median(self) -> float: ...

    def _cdf(self, x: NumericArray) -> NumericArray:
        return self._table.get()(x)


__all__ = [
    "NumericalSettings",
    "NumericalCDF",
    "NumericalRealDistribution",
    "UNIT_STEP_RANGE",
    "THRESHOLD_RANGE",
]
