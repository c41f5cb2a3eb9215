"""
Common fixtures and utilities for continuous distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np
from scipy import integrate

from pysatl_dist.distributions.distribution import RealDistribution


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    # Precision for quadrature and numerical inversion checks
    NUMERICAL_PRECISION = 1e-6

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @staticmethod
    def assert_pdf_integrates_to_one(distr: RealDistribution, precision: float = 1e-6) -> None:
        """Integrate the density over the support (split at the mean)."""
        support = distr.support
        center = distr.mean()
        left, _ = integrate.quad(lambda x: distr.pdf(x), support.lower, center, limit=200)
        right, _ = integrate.quad(lambda x: distr.pdf(x), center, support.upper, limit=200)
        assert abs(left + right - 1.0) < precision

    @staticmethod
    def assert_quantile_inverts_cdf(
        distr: RealDistribution, probabilities: list[float], precision: float
    ) -> None:
        """Check ``cdf(quantile(F)) == F`` for each probability."""
        F = np.asarray(probabilities, dtype=float)
        np.testing.assert_allclose(distr.cdf(distr.quantile(F)), F, atol=precision)

    @staticmethod
    def assert_sample_moments(
        distr: RealDistribution, rng: np.random.Generator, size: int = 50_000
    ) -> None:
        """Compare sample moments with the reported mean and standard deviation."""
        values = distr.sample(rng, size)
        tolerance = 5.0 * distr.sdev() / math.sqrt(size)
        assert abs(np.mean(values) - distr.mean()) < tolerance
        assert abs(np.std(values) - distr.sdev()) < 10.0 * tolerance
