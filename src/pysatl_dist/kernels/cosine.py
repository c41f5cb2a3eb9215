"""
Cosine kernel.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_dist.kernels.kernel import KernelDistribution

if TYPE_CHECKING:
    from pysatl_dist.types import NumericArray


class CosineKernel(KernelDistribution):
    """
    Cosine kernel with density ``(pi/4) cos(pi x / 2)`` on ``(-1, 1)``.

    The quantile ``2 asin(2F - 1) / pi`` has a closed form, so the default
    transformation sampler is exact.
    """

    INSTANCE: ClassVar[CosineKernel]

    __slots__ = ()

    def variance(self) -> float:
        return 1.0 - 8.0 / (math.pi * math.pi)

    def _cdf(self, x: NumericArray) -> NumericArray:
        y = np.clip(x, -1.0, 1.0)
        return 0.5 * (np.sin(0.5 * math.pi * y) + 1.0)

    def _pdf(self, x: NumericArray) -> NumericArray:
        return np.where((x > -1.0) & (x < 1.0), 0.25 * math.pi * np.cos(0.5 * math.pi * x), 0.0)

    def _quantile(self, F: NumericArray) -> NumericArray:
        return 2.0 * np.arcsin(2.0 * F - 1.0) / math.pi


CosineKernel.INSTANCE = CosineKernel()


__all__ = ["CosineKernel"]
