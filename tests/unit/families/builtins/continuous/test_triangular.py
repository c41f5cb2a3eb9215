"""
Tests for Triangular Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import triang

from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ParameterError
from pysatl_dist.families.builtins import TriangularDistribution
from pysatl_dist.families.configuration import configure_families_register
from pysatl_dist.types import FamilyName

from .base import BaseDistributionTest


class TestTriangularFamily(BaseDistributionTest):
    """Test suite for Triangular distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.triangular_family = registry.get(FamilyName.TRIANGULAR)
        self.triangular_dist_example = self.triangular_family(lower=1.0, upper=5.0, mode=2.0)
        self.scipy_example = triang(c=0.25, loc=1.0, scale=4.0)

    def test_family_properties(self):
        assert self.triangular_family.name == FamilyName.TRIANGULAR
        assert self.triangular_family.parametrization_names == ["standard"]

    def test_standard_parametrization_creation(self):
        assert isinstance(self.triangular_dist_example, TriangularDistribution)
        assert self.triangular_dist_example.parameters == {"lower": 1.0, "upper": 5.0, "mode": 2.0}

    def test_parametrization_constraints(self):
        with pytest.raises(ParameterError, match="lower < upper"):
            self.triangular_family(lower=2.0, upper=2.0, mode=2.0)
        with pytest.raises(ParameterError, match="lower <= mode <= upper"):
            self.triangular_family(lower=0.0, upper=1.0, mode=2.0)

    @pytest.mark.parametrize(
        "lower, upper, mode",
        [(0.0, 0.0, 0.0), (0.0, math.inf, 1.0), (0.0, 1.0, -0.5), (0.0, 1.0, 1.5)],
    )
    def test_invalid_parameters(self, lower, upper, mode):
        with pytest.raises(ParameterError):
            TriangularDistribution(lower, upper, mode)

    @pytest.mark.parametrize("method", ["mean", "median", "sdev", "var"])
    def test_moments_match_scipy(self, method):
        actual = getattr(self.triangular_dist_example, "variance" if method == "var" else method)()
        expected = getattr(self.scipy_example, method)()
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_mode(self):
        assert self.triangular_dist_example.mode() == 2.0

    @pytest.mark.parametrize(
        "mode, expected_median",
        [
            (2.0, 5.0 - math.sqrt(6.0)),
            (4.0, 1.0 + math.sqrt(6.0)),
            (3.0, 3.0),
        ],
    )
    def test_median_branches(self, mode, expected_median):
        distr = TriangularDistribution(1.0, 5.0, mode)
        assert distr.median() == pytest.approx(expected_median)
        assert distr.cdf(distr.median()) == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "method, test_data, scipy_method",
        [
            ("pdf", [0.0, 1.0, 1.5, 2.0, 3.0, 4.5, 5.0, 6.0], "pdf"),
            ("cdf", [0.0, 1.0, 1.5, 2.0, 3.0, 4.5, 5.0, 6.0], "cdf"),
            ("quantile", [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0], "ppf"),
        ],
    )
    def test_array_input(self, method, test_data, scipy_method):
        input_array = np.array(test_data)
        result_array = getattr(self.triangular_dist_example, method)(input_array)

        assert result_array.shape == input_array.shape
        self.assert_arrays_almost_equal(
            result_array, getattr(self.scipy_example, scipy_method)(input_array)
        )

    def test_peak_density(self):
        assert self.triangular_dist_example.pdf(2.0) == pytest.approx(0.5)

    def test_mode_at_bound(self):
        distr = TriangularDistribution(0.0, 2.0, 0.0)

        assert distr.cdf(1.0) == pytest.approx(0.75)
        assert distr.quantile(0.75) == pytest.approx(1.0)

    def test_support(self):
        assert self.triangular_dist_example.support == RealInterval.closed(1.0, 5.0)

    def test_kernel(self):
        kernel = TriangularDistribution.KERNEL

        assert kernel.support == RealInterval.UNIT
        assert kernel.mean() == 0.0
        assert kernel.variance() == pytest.approx(1.0 / 6.0)

    def test_pdf_integrates_to_one(self):
        self.assert_pdf_integrates_to_one(self.triangular_dist_example)

    def test_sampling(self, rng):
        values = self.triangular_dist_example.sample(rng, 10_000)

        assert np.all((values >= 1.0) & (values <= 5.0))
        self.assert_sample_moments(self.triangular_dist_example, rng)
