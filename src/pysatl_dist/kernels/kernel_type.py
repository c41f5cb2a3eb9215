"""
Kernel Selection
================

:class:`KernelType` enumerates the smoothing kernels available to kernel
density estimation and computes the default bandwidth for a sample.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from pysatl_dist.families.builtins.continuous.normal import NormalDistribution
from pysatl_dist.families.builtins.continuous.triangular import TriangularDistribution
from pysatl_dist.families.builtins.continuous.uniform import UniformDistribution
from pysatl_dist.kernels.biweight import BiweightKernel
from pysatl_dist.kernels.cosine import CosineKernel
from pysatl_dist.kernels.epanechnikov import EpanechnikovKernel
from pysatl_dist.stats import StatSummary

if TYPE_CHECKING:
    from pysatl_dist.distributions.distribution import RealDistribution

_SILVERMAN_FACTOR = 0.9
_SILVERMAN_IQR_SCALE = 1.34
_SILVERMAN_EXPONENT = -0.2


class KernelType(StrEnum):
    """Smoothing kernels for kernel density estimation."""

    UNIFORM = "uniform"
    TRIANGULAR = "triangular"
    EPANECHNIKOV = "epanechnikov"
    BIWEIGHT = "biweight"
    COSINE = "cosine"
    GAUSSIAN = "gaussian"

    def kernel(self) -> RealDistribution:
        """The kernel distribution, centered at zero."""
        match self:
            case KernelType.UNIFORM:
                return UniformDistribution.KERNEL
            case KernelType.TRIANGULAR:
                return TriangularDistribution.KERNEL
            case KernelType.EPANECHNIKOV:
                return EpanechnikovKernel.INSTANCE
            case KernelType.BIWEIGHT:
                return BiweightKernel.INSTANCE
            case KernelType.COSINE:
                return CosineKernel.INSTANCE
            case KernelType.GAUSSIAN:
                return NormalDistribution.STANDARD

    def bandwidth(self, sample: StatSummary | Iterable[float] | np.ndarray) -> float:
        """
        Silverman's rule-of-thumb bandwidth.

            h = 0.9 * min(SD, IQR / 1.34) * n^(-1/5)

        Parameters
        ----------
        sample : StatSummary or array_like
            A data sample or its summary.

        Returns
        -------
        float
            The bandwidth; zero for a sample with no spread.
        """
        summary = sample if isinstance(sample, StatSummary) else StatSummary.of(sample)
        spread = min(summary.sd, summary.iqr / _SILVERMAN_IQR_SCALE)
        return _SILVERMAN_FACTOR * spread * summary.count**_SILVERMAN_EXPONENT


__all__ = ["KernelType"]
