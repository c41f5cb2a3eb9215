"""
Kernel Density Estimation
=========================

:class:`KernelDensityDistribution` smooths an empirical sample by centering
a scaled kernel at every observation:

    F(x) = 1/n       * Σ K((x - x_i) / h)
    f(x) = 1/(n * h) * Σ k((x - x_i) / h)

where ``K`` and ``k`` are the kernel CDF and PDF and ``h`` the bandwidth.

Notes
-----
Each query costs ``O(n)`` kernel evaluations. Query points are processed in
blocks so the intermediate ``(points, observations)`` matrix stays bounded.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from pysatl_dist.distributions.distribution import RealDistribution
from pysatl_dist.distributions.support import RealInterval
from pysatl_dist.errors import ParameterError
from pysatl_dist.kernels.kernel_type import KernelType
from pysatl_dist.stats import StatSummary

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_dist.types import NumericArray

logger = logging.getLogger(__name__)

DEFAULT_KERNEL = KernelType.EPANECHNIKOV

_BLOCK_SIZE = 1 << 20
"""Upper bound on kernel evaluations held in memory at once."""


class KernelDensityDistribution(RealDistribution):
    """
    Kernel density estimate of a data sample.

    Parameters
    ----------
    sample : array_like
        Observations; at least two are required. The sample is copied and
        sorted, so later changes to the argument have no effect.
    kernel_type : KernelType, default KernelType.EPANECHNIKOV
        Smoothing kernel.
    bandwidth : float, optional
        Kernel scale. Silverman's rule of thumb for ``kernel_type`` applies
        when omitted.

    Raises
    ------
    ParameterError
        If the sample has fewer than two observations or the bandwidth is
        not positive.

    Notes
    -----
    The mean, standard deviation and variance are those of the sample, not
    of the smoothed density. Estimates compare by identity.
    """

    __slots__ = (
        "_values",
        "_kernel_type",
        "_kernel",
        "_summary",
        "_bandwidth",
        "_sample_scale",
    )

    def __init__(
        self,
        sample: Iterable[float] | np.ndarray,
        kernel_type: KernelType = DEFAULT_KERNEL,
        bandwidth: float | None = None,
    ):
        values = np.sort(
            np.array(sample if isinstance(sample, np.ndarray) else list(sample), dtype=float),
            axis=None,
        )
        if values.size < 2:
            raise ParameterError("At least two observations are required.", "sample", values.size)
        values.flags.writeable = False

        self._values = values
        self._kernel_type = KernelType(kernel_type)
        self._kernel = self._kernel_type.kernel()
        self._summary = StatSummary.of(values)
        self._bandwidth = self._resolve_bandwidth(bandwidth)
        self._sample_scale = self._bandwidth * self._kernel.sdev()

        logger.debug(
            "Kernel density estimate of %d observations, kernel %s, bandwidth %g",
            values.size,
            self._kernel_type,
            self._bandwidth,
        )

    def _resolve_bandwidth(self, bandwidth: float | None) -> float:
        if bandwidth is None:
            bandwidth = self._kernel_type.bandwidth(self._summary)
            if not bandwidth > 0.0:
                raise ParameterError(
                    "Sample has no spread; a bandwidth must be given.", "bandwidth", bandwidth
                )
            return bandwidth
        if not (bandwidth > 0.0 and math.isfinite(bandwidth)):
            raise ParameterError("Bandwidth must be positive.", "bandwidth", bandwidth)
        return float(bandwidth)

    @property
    def sample_values(self) -> NumericArray:
        """Sorted observations (read-only)."""
        return self._values

    @property
    def kernel_type(self) -> KernelType:
        return self._kernel_type

    @property
    def kernel(self) -> RealDistribution:
        return self._kernel

    @property
    def bandwidth(self) -> float:
        return self._bandwidth

    @property
    def summary(self) -> StatSummary:
        return self._summary

    @property
    def support(self) -> RealInterval:
        half_width = 0.5 * self._bandwidth * self._kernel.support.width
        return RealInterval.closed(self._summary.min - half_width, self._summary.max + half_width)

    def mean(self) -> float:
        return self._summary.mean

    def mode(self) -> float:
        return math.nan

    def sdev(self) -> float:
        return self._summary.sd

    def variance(self) -> float:
        return self._summary.variance

    def _cdf(self, x: NumericArray) -> NumericArray:
        return self._kernel_sum(x, self._kernel.cdf) / self._values.size

    def _pdf(self, x: NumericArray) -> NumericArray:
        return self._kernel_sum(x, self._kernel.pdf) / (self._values.size * self._bandwidth)

    def _kernel_sum(
        self, x: NumericArray, func: Callable[[NumericArray], NumericArray]
    ) -> NumericArray:
        flat = x.ravel()
        result = np.empty(flat.size, dtype=float)
        block = max(1, _BLOCK_SIZE // self._values.size)
        for start in range(0, flat.size, block):
            points = flat[start : start + block]
            z = np.subtract.outer(points, self._values) / self._bandwidth
            result[start : start + block] = func(z).sum(axis=1)
        return result.reshape(x.shape)

    def _sample(self, rng: np.random.Generator, size: int) -> NumericArray:
        index = rng.integers(self._values.size, size=size)
        return self._values[index] + self._sample_scale * self._kernel.sample(rng, size)


__all__ = ["KernelDensityDistribution", "DEFAULT_KERNEL"]
