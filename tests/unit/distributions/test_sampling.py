__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy import stats

from pysatl_dist.distributions.sampling import (
    RejectionSamplingStrategy,
    TransformSamplingStrategy,
)
from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ConvergenceError, ParameterError, UnsupportedOperationError
from pysatl_dist.families.builtins import (
    NormalDistribution,
    TriangularDistribution,
    UniformDistribution,
)
from pysatl_dist.kernels import BiweightKernel
from tests.utils.mocks import ScipyBackedDistribution

from .test_basic import DistributionTestBase


class TestTransformSampling(DistributionTestBase):
    def test_uses_quantile(self, rng: np.random.Generator) -> None:
        distr = TriangularDistribution(0.0, 4.0, 1.0)
        values = TransformSamplingStrategy().sample(distr, rng, 20_000)

        assert values.shape == (20_000,)
        assert np.all((values >= 0.0) & (values <= 4.0))
        assert np.mean(values) == pytest.approx(distr.mean(), abs=0.05)

    def test_goodness_of_fit(self, rng: np.random.Generator) -> None:
        distr = ScipyBackedDistribution(stats.logistic(loc=1.0, scale=0.5))
        values = distr.sample(rng, 2000)
        assert stats.kstest(values, stats.logistic(loc=1.0, scale=0.5).cdf).pvalue > 1e-3


class TestRejectionSampling(DistributionTestBase):
    def test_default_uniform_trial(self, rng: np.random.Generator) -> None:
        distr = TriangularDistribution(-1.0, 3.0, 0.0)
        values = RejectionSamplingStrategy().sample(distr, rng, 20_000)

        assert np.all((values >= -1.0) & (values <= 3.0))
        assert np.mean(values) == pytest.approx(distr.mean(), abs=0.05)
        assert np.std(values) == pytest.approx(distr.sdev(), abs=0.05)

    def test_custom_trial(self, rng: np.random.Generator) -> None:
        beta = stats.beta(2.0, 2.0)
        distr = ScipyBackedDistribution(beta, RealInterval.FRACTIONAL)
        trial = UniformDistribution(0.0, 1.0)

        values = RejectionSamplingStrategy(trial, 1.5).sample(distr, rng, 5000)
        assert stats.kstest(values, beta.cdf).pvalue > 1e-3

    def test_reject_single_variate(self, rng: np.random.Generator) -> None:
        value = TriangularDistribution(0.0, 1.0, 0.5).reject(rng)
        assert isinstance(value, float)
        assert 0.0 <= value <= 1.0

    def test_reject_with_trial(self, rng: np.random.Generator) -> None:
        distr = TriangularDistribution(0.0, 1.0, 0.5)
        value = distr.reject(rng, UniformDistribution(-1.0, 2.0), 6.0)
        assert 0.0 <= value <= 1.0

    def test_rejection_strategy_class_attribute(self, rng: np.random.Generator) -> None:
        assert isinstance(BiweightKernel.sampling_strategy, RejectionSamplingStrategy)
        values = BiweightKernel.INSTANCE.sample(rng, 1000)
        assert np.all(np.abs(values) <= 1.0)

    def test_trial_and_bound_go_together(self) -> None:
        with pytest.raises(ParameterError):
            RejectionSamplingStrategy(UniformDistribution(0.0, 1.0))
        with pytest.raises(ParameterError):
            RejectionSamplingStrategy(bound_m=2.0)

    def test_trial_must_span_support(self, rng: np.random.Generator) -> None:
        distr = TriangularDistribution(0.0, 2.0, 1.0)
        strategy = RejectionSamplingStrategy(UniformDistribution(0.0, 1.0), 4.0)
        with pytest.raises(ParameterError):
            strategy.sample(distr, rng, 10)

    @pytest.mark.parametrize("bound_m", [0.5, 1.0])
    def test_bound_must_exceed_one(self, rng: np.random.Generator, bound_m: float) -> None:
        distr = TriangularDistribution(0.0, 1.0, 0.5)
        strategy = RejectionSamplingStrategy(UniformDistribution(0.0, 1.0), bound_m)
        with pytest.raises(ParameterError):
            strategy.sample(distr, rng, 10)

    def test_infinite_support_needs_trial(self, rng: np.random.Generator) -> None:
        with pytest.raises(UnsupportedOperationError):
            NormalDistribution().reject(rng)

    def test_no_mode_needs_trial(self, rng: np.random.Generator) -> None:
        with pytest.raises(UnsupportedOperationError):
            UniformDistribution(0.0, 1.0).reject(rng)

    def test_iteration_cap(self, rng: np.random.Generator) -> None:
        # The trial density is far below the target, so almost nothing is accepted
        distr = ScipyBackedDistribution(stats.norm(0.0, 1.0e-6))
        trial = NormalDistribution(0.0, 1.0e3)
        strategy = RejectionSamplingStrategy(trial, 1.5)
        with pytest.raises(ConvergenceError, match="Rejection sampling failed"):
            strategy.sample(distr, rng, 1)


class TestStrategiesAgree(DistributionTestBase):
    SIZE = 40_000

    @pytest.mark.parametrize(
        "strategy",
        [TransformSamplingStrategy(), RejectionSamplingStrategy()],
        ids=["transform", "rejection"],
    )
    def test_moments_converge(
        self,
        strategy: TransformSamplingStrategy | RejectionSamplingStrategy,
        rng: np.random.Generator,
    ) -> None:
        distr = TriangularDistribution(0.0, 4.0, 1.0)
        values = strategy.sample(distr, rng, self.SIZE)

        assert np.all((values >= 0.0) & (values <= 4.0))
        assert np.mean(values) == pytest.approx(distr.mean(), abs=0.03)
        assert np.var(values, ddof=1) == pytest.approx(distr.variance(), rel=0.03)
