"""
Tests for Uniform Distribution Family

This module tests the functionality of the continuous uniform distribution
family, including parameterizations, closed-form functions and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import uniform

from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ParameterError
from pysatl_dist.families.builtins import UniformDistribution
from pysatl_dist.families.configuration import configure_families_register
from pysatl_dist.types import ContinuousSupportShape1D, FamilyName

from .base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(lower_bound=2.0, upper_bound=5.0)

    def test_family_properties(self):
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert set(self.uniform_family.parametrization_names) == {"standard", "meanWidth"}
        assert self.uniform_family.base_parametrization_name == "standard"

    def test_standard_parametrization_creation(self):
        dist = self.uniform_family(lower_bound=2.0, upper_bound=5.0)

        assert isinstance(dist, UniformDistribution)
        assert dist.parameters == {"lower": 2.0, "upper": 5.0}

    def test_mean_width_parametrization_creation(self):
        dist = self.uniform_family(mean=3.5, width=3.0, parametrization_name="meanWidth")
        assert dist == UniformDistribution(2.0, 5.0)

    def test_parametrization_constraints(self):
        with pytest.raises(ParameterError, match="lower_bound < upper_bound"):
            self.uniform_family(lower_bound=5.0, upper_bound=2.0)
        with pytest.raises(ParameterError, match="width > 0"):
            self.uniform_family(mean=0.0, width=0.0, parametrization_name="meanWidth")

    @pytest.mark.parametrize(
        "lower, upper",
        [(1.0, 1.0), (0.0, math.inf), (-math.inf, 0.0)],
    )
    def test_invalid_support(self, lower, upper):
        with pytest.raises(ParameterError):
            UniformDistribution(lower, upper)

    def test_over_support(self):
        dist = UniformDistribution.over(RealInterval.open(0.0, 2.0))

        assert dist.support == RealInterval.open(0.0, 2.0)
        assert dist.density == pytest.approx(0.5)
        with pytest.raises(ParameterError):
            UniformDistribution.over(RealInterval.POSITIVE)

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("mean", 3.5),
            ("median", 3.5),
            ("sdev", 3.0 / math.sqrt(12.0)),
            ("variance", 0.75),
        ],
    )
    def test_moments(self, method, expected):
        actual = getattr(self.uniform_dist_example, method)()
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_mode_is_undefined(self):
        assert math.isnan(self.uniform_dist_example.mode())

    @pytest.mark.parametrize(
        "method, test_data, scipy_func",
        [
            ("pdf", [0.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.pdf),
            ("cdf", [0.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.cdf),
            ("quantile", [0.0, 0.1, 0.25, 0.5, 0.75, 1.0], uniform.ppf),
        ],
    )
    def test_array_input(self, method, test_data, scipy_func):
        input_array = np.array(test_data)
        result_array = getattr(self.uniform_dist_example, method)(input_array)

        assert result_array.shape == input_array.shape
        self.assert_arrays_almost_equal(result_array, scipy_func(input_array, loc=2.0, scale=3.0))

    def test_uniform_support(self):
        support = self.uniform_dist_example.support

        assert support == RealInterval.closed(2.0, 5.0)
        assert support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL

    def test_kernel(self):
        kernel = UniformDistribution.KERNEL

        assert kernel.support == RealInterval.UNIT
        assert kernel.mean() == 0.0
        assert kernel.variance() == pytest.approx(1.0 / 3.0)

    def test_pdf_integrates_to_one(self):
        self.assert_pdf_integrates_to_one(self.uniform_dist_example)

    def test_sampling(self, rng):
        values = self.uniform_dist_example.sample(rng, 10_000)

        assert np.all((values >= 2.0) & (values <= 5.0))
        self.assert_sample_moments(self.uniform_dist_example, rng)
