"""
Sampling Strategies
===================

This module defines the pluggable generic random variate generators shared
by the continuous distributions:

- :class:`SamplingStrategy` — protocol for drawing an array of variates.
- :class:`TransformSamplingStrategy` — the transformation (inverse CDF)
  method, ``quantile(U)`` with ``U ~ U(0, 1)``.
- :class:`RejectionSamplingStrategy` — von Neumann's rejection method
  against a trial distribution.

Notes
-----
- Strategies are stateless; the random generator is always supplied by
  the caller.
- Rejection sampling is vectorized: every pending variate gets one
  trial per round, and a variate still pending after ``1000 * M`` rounds
  fails the whole draw.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_dist.errors import ConvergenceError, ParameterError, UnsupportedOperationError

if TYPE_CHECKING:
    from pysatl_dist.distributions.distribution import RealDistribution
    from pysatl_dist.types import NumericArray

logger = logging.getLogger(__name__)

REJECTION_ITERATION_FACTOR = 1000
"""Rejection sampling gives up after this many trials per unit of the bound ``M``."""


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a 1D array of variates)."""

    def sample(
        self, distr: RealDistribution, rng: np.random.Generator, size: int
    ) -> NumericArray: ...


class TransformSamplingStrategy:
    """
    Inverse transform sampler.

    Applies the distribution's quantile function to i.i.d. uniforms
    ``U ~ U(0, 1)``. Always correct, but only as fast as the quantile.
    """

    def sample(self, distr: RealDistribution, rng: np.random.Generator, size: int) -> NumericArray:
        return np.asarray(distr.quantile(rng.random(size)), dtype=float)


class RejectionSamplingStrategy:
    """
    Von Neumann rejection sampler.

    A trial ``y`` drawn from the trial distribution ``g`` is accepted when
    ``u * M * g(y) < f(y)`` for ``u ~ U(0, 1)``. On average a variate is
    accepted after ``M`` trials.

    Parameters
    ----------
    trial : RealDistribution, optional
        Trial distribution whose support spans the target support. When
        omitted the uniform distribution over the target support is used
        with ``M = width * pdf(mode)``, which requires a finite support and
        a unimodal target.
    bound_m : float, optional
        Likelihood ratio bound; required when ``trial`` is given.

    Raises
    ------
    ParameterError
        If only one of ``trial`` and ``bound_m`` is given.
    """

    def __init__(self, trial: RealDistribution | None = None, bound_m: float | None = None):
        if (trial is None) != (bound_m is None):
            raise ParameterError("Trial distribution and likelihood bound go together.")
        self.trial = trial
        self.bound_m = bound_m

    def sample(self, distr: RealDistribution, rng: np.random.Generator, size: int) -> NumericArray:
        """
        Draw ``size`` variates from ``distr``.

        Raises
        ------
        UnsupportedOperationError
            If the default uniform trial is used on an infinite support or
            a distribution without a finite mode.
        ParameterError
            If the trial support does not span the target support or the
            bound does not exceed 1.
        ConvergenceError
            If a variate is still rejected after ``1000 * M`` trials.
        """
        if self.trial is None or self.bound_m is None:
            trial, bound_m = _uniform_trial(distr)
        else:
            trial, bound_m = self.trial, self.bound_m

        if not trial.support.contains(distr.support):
            raise ParameterError("Trial distribution does not span this distribution.")
        if bound_m <= 1.0:
            raise ParameterError("Likelihood ratio bound must exceed one.", "bound_m", bound_m)

        max_iter = int(REJECTION_ITERATION_FACTOR * bound_m)
        result = np.empty(size, dtype=float)
        pending = np.arange(size)

        for _ in range(max_iter):
            if pending.size == 0:
                break
            unif = rng.random(pending.size)
            y = trial.sample(rng, pending.size)
            accepted = bound_m * trial.pdf(y) * unif < distr.pdf(y)
            result[pending[accepted]] = y[accepted]
            pending = pending[~accepted]

        if pending.size:
            raise ConvergenceError("Rejection sampling failed.", max_iter)

        return result


def _uniform_trial(distr: RealDistribution) -> tuple[RealDistribution, float]:
    from pysatl_dist.families.builtins.continuous.uniform import UniformDistribution

    support = distr.support
    if not support.is_finite:
        raise UnsupportedOperationError("Support interval must be finite for rejection sampling.")

    mode = distr.mode()
    if not math.isfinite(mode):
        raise UnsupportedOperationError("Distribution is not unimodal.")

    bound_m = support.width * float(distr.pdf(mode))
    logger.debug("Uniform rejection trial over %s with bound %g", support, bound_m)
    return UniformDistribution.over(support), bound_m


__all__ = [
    "SamplingStrategy",
    "TransformSamplingStrategy",
    "RejectionSamplingStrategy",
    "REJECTION_ITERATION_FACTOR",
]
