"""
Kernels subpackage

Smoothing kernels and kernel density estimation:

- Epanechnikov, biweight and cosine kernels (the uniform, triangular and
  Gaussian kernels are the standardized built-in families);
- :class:`KernelType` with Silverman's bandwidth rule;
- :class:`KernelDensityDistribution`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .biweight import BiweightKernel
from .cosine import CosineKernel
from .density import DEFAULT_KERNEL, KernelDensityDistribution
from .epanechnikov import EpanechnikovKernel
from .kernel import KernelDistribution
from .kernel_type import KernelType

__all__ = [
    "KernelDistribution",
    "EpanechnikovKernel",
    "BiweightKernel",
    "CosineKernel",
    "KernelType",
    "KernelDensityDistribution",
    "DEFAULT_KERNEL",
]
