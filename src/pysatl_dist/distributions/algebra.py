"""
Distribution Sum Algebra
========================

Construction of the distribution of a sum of IID variables:

- a single variable is its own sum;
- below :data:`NORMAL_SUM_THRESHOLD` variables the sum is simulated
  :data:`SUM_SAMPLE_SIZE` times and smoothed by a kernel density estimate;
- at or above the threshold the central limit theorem gives a normal
  distribution with mean ``count * mean`` and standard deviation
  ``sqrt(count) * sdev``.

Families with exact sum distributions (normal, Laplace) override
:meth:`RealDistribution.sum` and bypass this module.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

import numpy as np

from pysatl_dist.errors import ParameterError, QueryArgumentError

if TYPE_CHECKING:
    from pysatl_dist.distributions.distribution import RealDistribution

logger = logging.getLogger(__name__)

NORMAL_SUM_THRESHOLD = 30
"""Sums of at least this many variables are treated as normal."""

SUM_SAMPLE_SIZE = 100_000
"""Number of simulated sums behind a Monte Carlo sum distribution."""


def sum_distribution(
    distr: RealDistribution, count: int, rng: np.random.Generator | None = None
) -> RealDistribution:
    """
    Distribution of the sum of ``count`` IID variables drawn from ``distr``.

    Parameters
    ----------
    distr : RealDistribution
        Distribution of each summed variable.
    count : int
        Number of variables; must be positive.
    rng : numpy.random.Generator, optional
        Source of randomness for the Monte Carlo construction; required
        when ``1 < count < NORMAL_SUM_THRESHOLD``.

    Returns
    -------
    RealDistribution
        ``distr`` itself, a :class:`KernelDensityDistribution` of simulated
        sums, or a :class:`NormalDistribution`.

    Raises
    ------
    ParameterError
        If ``count`` is not positive.
    QueryArgumentError
        If the Monte Carlo construction is needed and ``rng`` is omitted.
    """
    from pysatl_dist.families.builtins.continuous.normal import NormalDistribution

    if count < 1:
        raise ParameterError("Variable count must be positive.", "count", count)
    if count == 1:
        return distr
    if count < NORMAL_SUM_THRESHOLD:
        if rng is None:
            raise QueryArgumentError(
                f"A random generator is required to simulate the sum of {count} variables."
            )
        return simulate_sum(distr, count, rng)

    logger.debug("Normal approximation for the sum of %d variables from %r", count, distr)
    return NormalDistribution.sum_of(count, distr.mean(), distr.sdev())


def simulate_sum(
    distr: RealDistribution,
    count: int,
    rng: np.random.Generator,
    size: int = SUM_SAMPLE_SIZE,
) -> RealDistribution:
    """
    Kernel density estimate of ``size`` simulated sums of ``count`` variables.

    Parameters
    ----------
    distr : RealDistribution
        Distribution of each summed variable.
    count : int
        Number of variables per sum.
    rng : numpy.random.Generator
        Source of randomness.
    size : int, default SUM_SAMPLE_SIZE
        Number of simulated sums.
    """
    from pysatl_dist.kernels.density import KernelDensityDistribution

    logger.debug("Simulating %d sums of %d variables from %r", size, count, distr)
    draws = distr.sample(rng, size * count).reshape(size, count)
    return KernelDensityDistribution(draws.sum(axis=1))


__all__ = [
    "sum_distribution",
    "simulate_sum",
    "NORMAL_SUM_THRESHOLD",
    "SUM_SAMPLE_SIZE",
]
