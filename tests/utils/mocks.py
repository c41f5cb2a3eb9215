from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np
from scipy import stats

from pysatl_dist.distributions.distribution import RealDistribution
from pysatl_dist.distributions.numerical import NumericalRealDistribution, NumericalSettings
from pysatl_dist.distributions.support import RealInterval


class ScipyBackedDistribution(RealDistribution):
    """
    Distribution exposing only the CDF and PDF of a frozen SciPy distribution.

    Quantiles and variates go through the generic inversion and sampling
    machinery, so tests can compare them against SciPy's closed forms.
    """

    __slots__ = ("frozen", "_support", "cdf_calls")

    def __init__(self, frozen: Any, support: RealInterval = RealInterval.INFINITE):
        self.frozen = frozen
        self._support = support
        self.cdf_calls = 0

    @property
    def support(self) -> RealInterval:
        return self._support

    def mean(self) -> float:
        return float(self.frozen.mean())

    def mode(self) -> float:
        return math.nan

    def sdev(self) -> float:
        return float(self.frozen.std())

    def _cdf(self, x: np.ndarray) -> np.ndarray:
        self.cdf_calls += 1
        return np.asarray(self.frozen.cdf(x), dtype=float)

    def _pdf(self, x: np.ndarray) -> np.ndarray:
        return np.asarray(self.frozen.pdf(x), dtype=float)


class DensityOnlyDistribution(NumericalRealDistribution):
    """Numerically tabulated CDF of a frozen SciPy distribution's density."""

    __slots__ = ("frozen", "_support")

    def __init__(
        self,
        frozen: Any,
        support: RealInterval = RealInterval.INFINITE,
        settings: NumericalSettings | None = None,
    ):
        super().__init__(settings)
        self.frozen = frozen
        self._support = support

    @property
    def support(self) -> RealInterval:
        return self._support

    def mean(self) -> float:
        return float(self.frozen.mean())

    def median(self) -> float:
        return float(self.frozen.median())

    def mode(self) -> float:
        return math.nan

    def sdev(self) -> float:
        return float(self.frozen.std())

    def _pdf(self, x: np.ndarray) -> np.ndarray:
        return np.asarray(self.frozen.pdf(x), dtype=float)


def standard_logistic() -> ScipyBackedDistribution:
    return ScipyBackedDistribution(stats.logistic())
