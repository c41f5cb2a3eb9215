"""
Biweight (quartic) kernel.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_dist.distributions.sampling import RejectionSamplingStrategy
from pysatl_dist.kernels.kernel import KernelDistribution

if TYPE_CHECKING:
    from pysatl_dist.distributions.sampling import SamplingStrategy
    from pysatl_dist.types import NumericArray


class BiweightKernel(KernelDistribution):
    """
    Biweight kernel with density ``(15/16) (1 - x^2)^2`` on ``(-1, 1)``.

    Variates are drawn by rejection against the uniform distribution on
    the support.
    """

    INSTANCE: ClassVar[BiweightKernel]
    sampling_strategy: ClassVar[SamplingStrategy] = RejectionSamplingStrategy()

    __slots__ = ()

    def variance(self) -> float:
        return 1.0 / 7.0

    def _cdf(self, x: NumericArray) -> NumericArray:
        y = np.clip(x, -1.0, 1.0)
        y2 = y * y
        return 0.5 + y * (0.9375 - y2 * (0.625 - 0.1875 * y2))

    def _pdf(self, x: NumericArray) -> NumericArray:
        weight = 1.0 - x * x
        return np.where((x > -1.0) & (x < 1.0), 0.9375 * weight * weight, 0.0)


BiweightKernel.INSTANCE = BiweightKernel()


__all__ = ["BiweightKernel"]
