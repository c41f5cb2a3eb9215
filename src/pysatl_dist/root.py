"""
Univariate Root Finding
=======================

Bracketed solvers for ``f(x) = 0`` on a real interval:

- :class:`UnivariateRootFinder` — abstract solver with a shared bracketing
  helper.
- :class:`BrentRootFinder` — Brent's method (bisection, secant and inverse
  quadratic interpolation) with a fixed iteration budget.

Notes
-----
Non-convergence is never reported as a silent wrong answer: a missing
bracket or an exhausted iteration budget raises :class:`ConvergenceError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np
from scipy import optimize as _sp_optimize

from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ConvergenceError, ParameterError, QueryArgumentError

if TYPE_CHECKING:
    from pysatl_dist.types import ScalarFunc

logger = logging.getLogger(__name__)

BRACKET_MAX_ITER = 100
"""Maximum number of expansions performed by :meth:`UnivariateRootFinder.bracket`."""

BRACKET_FACTOR = 1.6
"""Growth factor applied to the interval width on each bracketing expansion."""

MAX_SOLVE_ITER = 1000
"""Iteration budget for Brent's method."""


class UnivariateRootFinder(ABC):
    """Abstract solver for ``f(x) = 0`` over a bracketing interval."""

    @staticmethod
    def bracket(function: ScalarFunc, interval: RealInterval) -> RealInterval:
        """
        Expand an initial interval until it brackets a root.

        Parameters
        ----------
        function : Callable[[float], float]
            The function to solve.
        interval : RealInterval
            Initial guess for the bracketing interval; must have finite,
            positive width.

        Returns
        -------
        RealInterval
            An open interval across which ``function`` changes sign.

        Raises
        ------
        ParameterError
            If the initial interval does not have finite positive width.
        ConvergenceError
            If no sign change is found within the expansion budget.
        """
        if not (interval.width > 0.0 and math.isfinite(interval.width)):
            raise ParameterError("Initial interval must have finite width.")

        lower = interval.lower
        upper = interval.upper
        func_lower = function(lower)
        func_upper = function(upper)

        for _ in range(BRACKET_MAX_ITER):
            if math.copysign(1.0, func_lower) * math.copysign(1.0, func_upper) < 0.0:
                return RealInterval.open(lower, upper)
            if abs(func_lower) < abs(func_upper):
                lower -= BRACKET_FACTOR * (upper - lower)
                func_lower = function(lower)
            else:
                upper += BRACKET_FACTOR * (upper - lower)
                func_upper = function(upper)

        raise ConvergenceError(f"No root in interval [{lower}, {upper}].", BRACKET_MAX_ITER)

    def solve(
        self, function: ScalarFunc, interval: RealInterval, initial: float | None = None
    ) -> float:
        """
        Find a root of ``function`` within ``interval``.

        Parameters
        ----------
        function : Callable[[float], float]
            The function to solve.
        interval : RealInterval
            An interval known to contain the root.
        initial : float, optional
            Initial guess for the root; defaults to the interval midpoint.

        Returns
        -------
        float
            The root of the function.

        Raises
        ------
        QueryArgumentError
            If the initial guess lies outside the interval.
        ConvergenceError
            If the solver does not converge.
        """
        if initial is None:
            initial = interval.midpoint

        if not interval.contains(initial):
            raise QueryArgumentError("Initial guess must lie within the bounding interval.")

        return self._solve(function, interval, float(initial))

    @abstractmethod
    def _solve(self, function: ScalarFunc, interval: RealInterval, initial: float) -> float: ...


class BrentRootFinder(UnivariateRootFinder):
    """
    Brent's method root finder.

    Parameters
    ----------
    absolute_accuracy : float, default 1e-6
        Absolute accuracy required in the solution.
    relative_accuracy : float, default 1e-14
        Relative accuracy required in the solution.

    Notes
    -----
    The iteration budget is fixed at :data:`MAX_SOLVE_ITER`. Brent's
    method works from the interval endpoints, so the initial guess is
    only validated, not used as a starting point.
    """

    def __init__(self, absolute_accuracy: float = 1.0e-06, relative_accuracy: float = 1.0e-14):
        if not absolute_accuracy > 0.0:
            raise ParameterError(
                "Absolute accuracy must be positive.", "absolute_accuracy", absolute_accuracy
            )
        if relative_accuracy < 4.0 * np.finfo(float).eps:
            raise ParameterError(
                "Relative accuracy is below machine resolution.",
                "relative_accuracy",
                relative_accuracy,
            )

        self.absolute_accuracy = float(absolute_accuracy)
        self.relative_accuracy = float(relative_accuracy)

    def _solve(self, function: ScalarFunc, interval: RealInterval, initial: float) -> float:
        try:
            root, result = _sp_optimize.brentq(
                function,
                interval.lower,
                interval.upper,
                xtol=self.absolute_accuracy,
                rtol=self.relative_accuracy,
                maxiter=MAX_SOLVE_ITER,
                full_output=True,
                disp=False,
            )
        except ValueError as exc:
            raise ConvergenceError(
                f"Function does not bracket a root on {interval}: {exc}"
            ) from exc

        if not result.converged:
            raise ConvergenceError(
                f"Brent solver failed on {interval}: {result.flag}", result.iterations
            )

        logger.debug("Brent solver converged to %g in %d iterations", root, result.iterations)
        return float(root)


__all__ = [
    "UnivariateRootFinder",
    "BrentRootFinder",
    "BRACKET_MAX_ITER",
    "BRACKET_FACTOR",
    "MAX_SOLVE_ITER",
]
