"""
Distribution Interfaces
=======================

This module defines the abstract univariate distribution contracts and the
behavior they share:

- :class:`RealDistribution` — continuous distribution over the reals with
  CDF, PDF, quantile, moments, sampling and sum algebra.
- :class:`DiscreteDistribution` — distribution over a contiguous range of
  integers with CDF and PMF.

Notes
-----
- Every query accepts a scalar or an array. Scalars produce ``float``
  (or ``int`` samples for discrete distributions), arrays produce arrays of
  the same shape.
- Distributions are immutable after construction; every stochastic
  operation takes an explicit :class:`numpy.random.Generator`.
- The continuous interval convention is half-open,
  ``cdf(interval) = cdf(upper) - cdf(lower)``, while the discrete range
  convention is inclusive at both ends,
  ``cdf(range) = cdf(upper) - cdf(lower - 1)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, cast, overload

import numpy as np

from pysatl_dist.distributions.sampling import (
    RejectionSamplingStrategy,
    TransformSamplingStrategy,
)
from pysatl_dist.distributions.support import IntSupport, RealInterval
from pysatl_dist.errors import ParameterError, QueryArgumentError
from pysatl_dist.root import BrentRootFinder
from pysatl_dist.types import Kind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from pysatl_dist.distributions.sampling import SamplingStrategy
    from pysatl_dist.types import IntArray, Number, NumericArray

_PROBABILITY_TOLERANCE = 1.0e-12
"""Probabilities this close to 0 or 1 invert to the support endpoints."""

_INVERSION_ACCURACY = 1.0e-06
"""Root-finder accuracy for CDF inversion, relative to the standard deviation."""


def _evaluate(func: Callable[[NumericArray], NumericArray], x: object) -> float | NumericArray:
    arr = np.asarray(x, dtype=float)
    result = np.asarray(func(np.atleast_1d(arr)), dtype=float).reshape(arr.shape)
    if arr.ndim == 0:
        return float(result)
    return cast("NumericArray", result)


def validate_quantile(F: Number | NumericArray) -> None:
    """
    Validate cumulative probabilities.

    Raises
    ------
    QueryArgumentError
        Unless every value lies in ``[0, 1]``.
    """
    arr = np.asarray(F, dtype=float)
    if not np.all((arr >= 0.0) & (arr <= 1.0)):
        raise QueryArgumentError("Non-fractional quantile value.")


def validate_sdev(sdev: float) -> None:
    """
    Validate a standard deviation.

    Raises
    ------
    ParameterError
        Unless ``sdev`` is positive.
    """
    if not sdev > 0.0:
        raise ParameterError("Non-positive standard deviation.", "sdev", sdev)


def _validate_count(count: int) -> None:
    if count < 0:
        raise QueryArgumentError(f"Sample count must be non-negative, got {count}.")


class _Distribution(ABC):
    """
    Value semantics shared by all distributions.

    Two distributions are equal when they have the same type and the same
    :attr:`parameters`. Distributions without scalar parameters (such as
    kernel density estimates) compare by identity.
    """

    __slots__ = ()

    @property
    def parameters(self) -> dict[str, float]:
        """Defining parameters of the distribution."""
        return {}

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        params = self.parameters
        return bool(params) and params == cast(_Distribution, other).parameters

    def __hash__(self) -> int:
        params = self.parameters
        if not params:
            return object.__hash__(self)
        return hash((type(self), tuple(params.items())))

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.parameters.items())
        return f"{type(self).__name__}({args})"


class RealDistribution(_Distribution):
    """
    Univariate continuous probability distribution.

    Subclasses supply the vectorized kernels :meth:`_cdf` and :meth:`_pdf`
    together with :meth:`mean`, :meth:`sdev`, :meth:`mode` and
    :attr:`support`. The quantile function defaults to numerical inversion
    of the CDF and sampling defaults to the transformation method; both
    are overridden where closed forms exist.

    Attributes
    ----------
    kind : Kind
        Always :attr:`Kind.CONTINUOUS`.
    sampling_strategy : SamplingStrategy
        Algorithm behind the default :meth:`sample` implementation.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS
    sampling_strategy: ClassVar[SamplingStrategy] = TransformSamplingStrategy()

    __slots__ = ()

    @property
    @abstractmethod
    def support(self) -> RealInterval:
        """Interval outside which the density vanishes."""

    @abstractmethod
    def mean(self) -> float: ...

    @abstractmethod
    def mode(self) -> float:
        """Mode of the distribution; ``nan`` unless unimodal."""

    @abstractmethod
    def sdev(self) -> float: ...

    def median(self) -> float:
        return float(self.quantile(0.5))

    def variance(self) -> float:
        sdev = self.sdev()
        return sdev * sdev

    def iqr(self) -> float:
        """Interquartile range ``quantile(0.75) - quantile(0.25)``."""
        return float(self.quantile(0.75)) - float(self.quantile(0.25))

    @overload
    def cdf(self, x: Number) -> float: ...
    @overload
    def cdf(self, x: RealInterval) -> float: ...
    @overload
    def cdf(self, x: NumericArray) -> NumericArray: ...

    def cdf(self, x: Number | RealInterval | NumericArray) -> float | NumericArray:
        """
        Cumulative distribution function.

        Parameters
        ----------
        x : Number, NumericArray or RealInterval
            Point(s) of evaluation, or an interval whose probability
            ``cdf(upper) - cdf(lower)`` is returned.

        Returns
        -------
        float or NumericArray
            Probability ``P(X <= x)`` (or the interval probability).
        """
        if isinstance(x, RealInterval):
            return float(self.cdf(x.upper)) - float(self.cdf(x.lower))
        return _evaluate(self._cdf, x)

    @overload
    def pdf(self, x: Number) -> float: ...
    @overload
    def pdf(self, x: NumericArray) -> NumericArray: ...

    def pdf(self, x: Number | NumericArray) -> float | NumericArray:
        """Probability density function."""
        return _evaluate(self._pdf, x)

    @overload
    def quantile(self, F: Number) -> float: ...
    @overload
    def quantile(self, F: NumericArray) -> NumericArray: ...

    def quantile(self, F: Number | NumericArray) -> float | NumericArray:
        """
        Quantile (inverse cumulative distribution) function.

        Parameters
        ----------
        F : Number or NumericArray
            Cumulative probabilities in ``[0, 1]``.

        Returns
        -------
        float or NumericArray
            Values ``x`` with ``cdf(x) == F``.

        Raises
        ------
        QueryArgumentError
            If any probability lies outside ``[0, 1]``.
        """
        validate_quantile(F)
        return _evaluate(self._quantile, F)

    @abstractmethod
    def _cdf(self, x: NumericArray) -> NumericArray: ...

    @abstractmethod
    def _pdf(self, x: NumericArray) -> NumericArray: ...

    def _quantile(self, F: NumericArray) -> NumericArray:
        return np.array([self.invert_cdf(float(value)) for value in F], dtype=float)

    def invert_cdf(self, F: float) -> float:
        """
        Solve ``cdf(x) == F`` numerically.

        Unbounded ends of the support are first replaced by points found by
        walking outward from the mean in steps of one standard deviation,
        then Brent's method refines the root to ``1e-6`` standard
        deviations.

        Raises
        ------
        QueryArgumentError
            If ``F`` lies outside ``[0, 1]``.
        ConvergenceError
            If the root finder fails.
        """
        validate_quantile(F)
        support = self.support
        lower = support.lower
        upper = support.upper

        if math.isclose(F, 0.0, abs_tol=_PROBABILITY_TOLERANCE):
            return lower
        if math.isclose(F, 1.0, abs_tol=_PROBABILITY_TOLERANCE):
            return upper

        mean = self.mean()
        sdev = self.sdev()

        if not math.isfinite(lower):
            lower = mean
            while self.cdf(lower) > F:
                lower -= sdev

        if not math.isfinite(upper):
            upper = mean
            while self.cdf(upper) < F:
                upper += sdev

        finder = BrentRootFinder(_INVERSION_ACCURACY * sdev)
        initial = lower + F * (upper - lower)
        return finder.solve(
            lambda x: float(self.cdf(x)) - F, RealInterval.closed(lower, upper), initial
        )

    def score_z(self, x: float) -> float:
        """Standard score ``(x - mean()) / sdev()``."""
        return score_z(x, self.mean(), self.sdev())

    @overload
    def sample(self, rng: np.random.Generator) -> float: ...
    @overload
    def sample(self, rng: np.random.Generator, count: int) -> NumericArray: ...

    def sample(self, rng: np.random.Generator, count: int | None = None) -> float | NumericArray:
        """
        Draw random variates.

        Parameters
        ----------
        rng : numpy.random.Generator
            Source of randomness.
        count : int, optional
            Number of variates. If omitted a single ``float`` is returned.

        Returns
        -------
        float or NumericArray
            One variate, or an array of ``count`` variates.
        """
        if count is None:
            return float(self._sample(rng, 1)[0])
        _validate_count(count)
        return self._sample(rng, count)

    def stream(self, rng: np.random.Generator, count: int) -> Iterator[float]:
        """Lazily yield ``count`` independent variates."""
        _validate_count(count)
        return (self.sample(rng) for _ in range(count))

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        return self.sampling_strategy.sample(self, rng, size)

    def transform(self, rng: np.random.Generator) -> float:
        """Draw one variate with the transformation method ``quantile(U)``."""
        return float(self.quantile(rng.random()))

    def reject(
        self,
        rng: np.random.Generator,
        trial: RealDistribution | None = None,
        bound_m: float | None = None,
    ) -> float:
        """
        Draw one variate with von Neumann's rejection method.

        Parameters
        ----------
        rng : numpy.random.Generator
            Source of randomness.
        trial : RealDistribution, optional
            Trial distribution whose support spans this support. Defaults
            to the uniform distribution over this (finite) support.
        bound_m : float, optional
            Likelihood ratio bound with ``pdf(x) <= bound_m * trial.pdf(x)``;
            required together with ``trial``.

        Returns
        -------
        float
            The accepted variate.
        """
        strategy = RejectionSamplingStrategy(trial, bound_m)
        return float(strategy.sample(self, rng, 1)[0])

    def sum(self, count: int, rng: np.random.Generator | None = None) -> RealDistribution:
        """
        Distribution of the sum of ``count`` IID variables from this distribution.

        Parameters
        ----------
        count : int
            Number of summed variables; at least 1.
        rng : numpy.random.Generator, optional
            Source of randomness for the Monte Carlo construction used for
            small counts; required there and unused otherwise.

        Returns
        -------
        RealDistribution
            ``self`` for one variable, a kernel density estimate of
            simulated sums below the normal threshold, and the normal
            approximation at or above it.
        """
        from pysatl_dist.distributions.algebra import sum_distribution

        return sum_distribution(self, count, rng)


def score_z(x: float, mean: float, sdev: float) -> float:
    """
    Standard score of ``x`` for the given moments.

    Raises
    ------
    ParameterError
        Unless ``sdev`` is positive.
    """
    validate_sdev(sdev)
    return (x - mean) / sdev


class DiscreteDistribution(_Distribution):
    """
    Univariate distribution over a contiguous range of integers.

    Subclasses supply the vectorized kernels :meth:`_cdf`, :meth:`_pmf`
    and :meth:`_sample` together with :meth:`mean`, :meth:`sdev` and
    :attr:`support`.
    """

    kind: ClassVar[Kind] = Kind.DISCRETE

    __slots__ = ()

    @property
    @abstractmethod
    def support(self) -> IntSupport: ...

    @abstractmethod
    def mean(self) -> float: ...

    @abstractmethod
    def sdev(self) -> float: ...

    def variance(self) -> float:
        sdev = self.sdev()
        return sdev * sdev

    @overload
    def cdf(self, k: int) -> float: ...
    @overload
    def cdf(self, k: IntSupport) -> float: ...
    @overload
    def cdf(self, k: IntArray) -> NumericArray: ...

    def cdf(self, k: int | IntSupport | IntArray) -> float | NumericArray:
        """
        Cumulative distribution function ``P(X <= k)``.

        An :class:`IntSupport` argument returns the probability of the
        inclusive range, ``cdf(upper) - cdf(lower - 1)``.
        """
        if isinstance(k, IntSupport):
            return float(self.cdf(k.upper)) - float(self.cdf(k.lower - 1))
        return self._evaluate(self._cdf, k)

    @overload
    def pmf(self, k: int) -> float: ...
    @overload
    def pmf(self, k: IntArray) -> NumericArray: ...

    def pmf(self, k: int | IntArray) -> float | NumericArray:
        """Probability mass function ``P(X == k)``."""
        return self._evaluate(self._pmf, k)

    @staticmethod
    def _evaluate(func: Callable[[IntArray], NumericArray], k: object) -> float | NumericArray:
        arr = np.asarray(k, dtype=np.int64)
        result = np.asarray(func(np.atleast_1d(arr)), dtype=float).reshape(arr.shape)
        if arr.ndim == 0:
            return float(result)
        return cast("NumericArray", result)

    @abstractmethod
    def _cdf(self, k: IntArray) -> NumericArray: ...

    @abstractmethod
    def _pmf(self, k: IntArray) -> NumericArray: ...

    @overload
    def sample(self, rng: np.random.Generator) -> int: ...
    @overload
    def sample(self, rng: np.random.Generator, count: int) -> IntArray: ...

    def sample(self, rng: np.random.Generator, count: int | None = None) -> int | IntArray:
        """Draw one variate, or an array of ``count`` variates."""
        if count is None:
            return int(self._sample(rng, 1)[0])
        _validate_count(count)
        return self._sample(rng, count)

    def stream(self, rng: np.random.Generator, count: int) -> Iterator[int]:
        """Lazily yield ``count`` independent variates."""
        _validate_count(count)
        return (self.sample(rng) for _ in range(count))

    @abstractmethod
    def _sample(self, rng: np.random.Generator, size: int) -> IntArray: ...


__all__ = [
    "RealDistribution",
    "DiscreteDistribution",
    "score_z",
    "validate_quantile",
    "validate_sdev",
]
