"""
Tests for the sum of IID Laplace variables

The series-expansion density is checked against the Laplace density itself,
a numerical convolution, its normalization, the small-z limit, and the
tabulated CDF against simulation.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import integrate, stats

from pysatl_dist.distributions.numerical import NumericalSettings
from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ParameterError
from pysatl_dist.families.builtins import LaplaceDistribution, LaplaceSumDistribution

from .base import BaseDistributionTest


class TestLaplaceSumDistribution(BaseDistributionTest):
    """Test suite for the exact Laplace sum distribution."""

    def setup_method(self):
        self.parent = LaplaceDistribution(0.5, 1.5)
        self.sum_example = LaplaceSumDistribution(self.parent, 4)

    def test_invalid_count(self):
        with pytest.raises(ParameterError):
            LaplaceSumDistribution(self.parent, 0)

    def test_properties(self):
        assert self.sum_example.parent is self.parent
        assert self.sum_example.count == 4
        assert self.sum_example.parameters == {"location": 0.5, "scale": 1.5, "count": 4}
        assert self.sum_example.support == RealInterval.INFINITE
        assert self.sum_example == LaplaceSumDistribution(LaplaceDistribution(0.5, 1.5), 4)

    def test_moments(self):
        assert self.sum_example.mean() == pytest.approx(2.0)
        assert self.sum_example.median() == pytest.approx(2.0)
        assert self.sum_example.mode() == pytest.approx(2.0)
        assert self.sum_example.sdev() == pytest.approx(2.0 * self.parent.sdev())
        assert self.sum_example.variance() == pytest.approx(4.0 * self.parent.variance())

    def test_single_variable_density(self):
        """A sum of one variable has the Laplace density."""
        single = LaplaceSumDistribution(self.parent, 1)
        x = np.linspace(-5.0, 6.0, 23)
        self.assert_arrays_almost_equal(single.pdf(x), self.parent.pdf(x))

    def test_two_variable_density(self):
        """Compare with the closed form of the two-variable sum."""
        pair = LaplaceSumDistribution(LaplaceDistribution(0.0, 1.0), 2)
        z = np.array([0.001, 0.5, 1.0, 2.0, 5.0])
        expected = (1.0 + z) * np.exp(-z) / 4.0
        self.assert_arrays_almost_equal(pair.pdf(z), expected)
        self.assert_arrays_almost_equal(pair.pdf(-z), expected)

    def test_density_matches_convolution(self):
        pair = LaplaceSumDistribution(self.parent, 2)
        x = 1.7
        expected, _ = integrate.quad(
            lambda t: self.parent.pdf(t) * self.parent.pdf(x - t), -60.0, 60.0, points=[0.5, 1.2]
        )
        assert pair.pdf(x) == pytest.approx(expected, rel=1e-6)

    @pytest.mark.parametrize("count", [2, 3, 10, 29])
    def test_pdf_integrates_to_one(self, count):
        self.assert_pdf_integrates_to_one(LaplaceSumDistribution(self.parent, count))

    @pytest.mark.parametrize("count", [2, 5, 20])
    def test_small_z_limit(self, count):
        """The density is continuous across the small-z branch."""
        distr = LaplaceSumDistribution(LaplaceDistribution(0.0, 1.0), count)
        limit = math.gamma(count - 0.5) / (2.0 * math.gamma(count) * math.sqrt(math.pi))

        assert distr.pdf(0.0) == pytest.approx(limit, rel=1e-12)
        assert distr.pdf(2.0e-4) == pytest.approx(limit, rel=1e-3)

    def test_large_count_coefficients_are_finite(self):
        distr = LaplaceSumDistribution(LaplaceDistribution(0.0, 1.0), 29)
        x = np.linspace(-40.0, 40.0, 81)
        assert np.all(np.isfinite(distr.pdf(x)))

    def test_cdf_is_monotone(self):
        x = np.linspace(-40.0, 45.0, 851)
        cdf = self.sum_example.cdf(x)

        assert np.all(np.diff(cdf) >= 0.0)
        assert cdf[0] == pytest.approx(0.0, abs=1e-6)
        assert cdf[-1] == pytest.approx(1.0, abs=1e-6)
        assert self.sum_example.cdf(self.sum_example.mean()) == pytest.approx(0.5, abs=1e-9)

    def test_cdf_is_symmetric(self):
        mean = self.sum_example.mean()
        for delta in [0.5, 1.0, 3.0]:
            left = self.sum_example.cdf(mean - delta)
            right = self.sum_example.cdf(mean + delta)
            assert left + right == pytest.approx(1.0, abs=1e-6)

    def test_cdf_matches_simulation(self, rng):
        values = self.sum_example.sample(rng, 20_000)
        assert stats.kstest(values, self.sum_example.cdf).pvalue > 1e-3

    def test_quantile_inverts_cdf(self):
        self.assert_quantile_inverts_cdf(
            self.sum_example, [0.01, 0.1, 0.5, 0.9, 0.99], 1e-5
        )

    def test_custom_settings(self):
        settings = NumericalSettings(unit_step=0.05, threshold=1e-4)
        distr = LaplaceSumDistribution(self.parent, 3, settings)
        assert distr.settings is settings
        assert distr.cdf(distr.mean()) == pytest.approx(0.5)

    def test_sampling(self, rng):
        self.assert_sample_moments(self.sum_example, rng)
