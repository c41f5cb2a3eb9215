"""
Binomial distribution family implementation.

Contains :class:`BinomialDistribution` and the Binomial family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, gammaln, xlogy

from pysatl_dist.distributions.distribution import DiscreteDistribution
from pysatl_dist.distributions.support import IntSupport
from pysatl_dist.errors import ParameterError, QueryArgumentError
from pysatl_dist.families.parametric_family import ParametricFamily
from pysatl_dist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_dist.families.registry import ParametricFamilyRegister
from pysatl_dist.types import FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_dist.types import IntArray, NumericArray


def _validate(n: int, p: float) -> None:
    if n < 0:
        raise ParameterError("Number of trials must be non-negative.", "n", n)
    if not 0.0 <= p <= 1.0:
        raise ParameterError("Probability must be between 0 and 1.", "p", p)


def _cdf(k: IntArray, n: int, p: float) -> NumericArray:
    result = np.where(k < 0, 0.0, 1.0)
    inside = (k >= 0) & (k < n)
    ks = k[inside]
    result[inside] = betainc(n - ks, ks + 1, 1.0 - p)
    return result


def _pmf(k: IntArray, n: int, p: float) -> NumericArray:
    result = np.zeros(k.shape, dtype=float)
    inside = (k >= 0) & (k <= n)
    ks = k[inside]
    log_p = xlogy(ks, p) + xlogy(n - ks, 1.0 - p)
    log_c = gammaln(n + 1.0) - gammaln(ks + 1.0) - gammaln(n - ks + 1.0)
    result[inside] = np.exp(log_p + log_c)
    return result


class BinomialDistribution(DiscreteDistribution):
    """
    Binomial distribution of the number of successes in ``n`` trials.

    Probability mass function:
        P(X = k) = C(n, k) p^k q^(n-k),   q = 1 - p

    Parameters
    ----------
    n : int
        Number of trials; must be non-negative.
    p : float
        Success probability of each trial, in ``[0, 1]``.

    Notes
    -----
    The CDF uses the regularized incomplete beta function and the PMF is
    assembled in log space, so large ``n`` does not overflow.
    """

    __slots__ = ("_n", "_p", "_q", "_support")

    def __init__(self, n: int, p: float):
        _validate(n, p)
        self._n = int(n)
        self._p = float(p)
        self._q = 1.0 - self._p
        self._support = IntSupport.over(0, self._n)

    @property
    def n(self) -> int:
        return self._n

    @property
    def p(self) -> float:
        return self._p

    @property
    def q(self) -> float:
        return self._q

    @property
    def parameters(self) -> dict[str, float]:
        return {"n": self._n, "p": self._p}

    @staticmethod
    def cdf_of(k: int, n: int, p: float) -> float:
        """CDF of the binomial distribution with the given parameters."""
        _validate(n, p)
        return float(_cdf(np.atleast_1d(np.asarray(k, dtype=np.int64)), n, p)[0])

    @staticmethod
    def pmf_of(k: int, n: int, p: float) -> float:
        """PMF of the binomial distribution with the given parameters."""
        _validate(n, p)
        return float(_pmf(np.atleast_1d(np.asarray(k, dtype=np.int64)), n, p)[0])

    @property
    def support(self) -> IntSupport:
        return self._support

    def mean(self) -> float:
        return self._n * self._p

    def sdev(self) -> float:
        return math.sqrt(self._n * self._p * self._q)

    def _cdf(self, k: IntArray) -> NumericArray:
        return _cdf(k, self._n, self._p)

    def _pmf(self, k: IntArray) -> NumericArray:
        return _pmf(k, self._n, self._p)

    def _sample(self, rng: np.random.Generator, size: int) -> IntArray:
        return rng.binomial(self._n, self._p, size).astype(np.int64)

    def test(self, actual: int) -> float:
        """
        Two-sided binomial test of an observed success count.

        Returns the probability that a count lies strictly closer to the
        expected count ``round(n p)`` than ``actual`` does; values near 1
        mean the observation is improbable.

        Parameters
        ----------
        actual : int
            Observed number of successes in ``[0, n]``.

        Returns
        -------
        float
            Rejection probability; 0 when ``actual`` equals the expected count.

        Raises
        ------
        QueryArgumentError
            If ``actual`` lies outside ``[0, n]``.
        """
        if not self._support.contains(actual):
            raise QueryArgumentError(f"Invalid number of successful trials: {actual}.")

        expected = math.floor(self._n * self._p + 0.5)
        deviation = abs(actual - expected)

        if deviation == 0:
            return 0.0

        k1 = max(0, expected - deviation + 1)
        k2 = min(self._n, expected + deviation - 1)
        return self.cdf(IntSupport.over(k1, k2))


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    def _build(parameters: Parametrization) -> BinomialDistribution:
        parameters = cast(_Standard, parameters)
        return BinomialDistribution(parameters.n, parameters.p)

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        kind=Kind.DISCRETE,
        distr_parametrizations=["standard"],
        factory=_build,
    )
    Binomial.__doc__ = BinomialDistribution.__doc__

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Success probability
        """

        n: int
        p: float

        @constraint(description="n >= 0")
        def check_n_non_negative(self) -> bool:
            return self.n >= 0

        @constraint(description="0 <= p <= 1")
        def check_p_fractional(self) -> bool:
            return 0.0 <= self.p <= 1.0

    ParametricFamilyRegister.register(Binomial)


__all__ = ["BinomialDistribution", "configure_binomial_family"]
