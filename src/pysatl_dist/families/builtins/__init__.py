"""
Built-in distribution families for PySATL Dist.

This package contains the closed-form distributions and the parametric
families registered by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dist.families.builtins.continuous import (
    ExponentialDistribution,
    LaplaceDistribution,
    LaplaceSumDistribution,
    LogNormalDistribution,
    NormalDistribution,
    TriangularDistribution,
    UniformDistribution,
    configure_exponential_family,
    configure_laplace_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_triangular_family,
    configure_uniform_family,
)
from pysatl_dist.families.builtins.discrete import (
    BinomialDistribution,
    configure_binomial_family,
)

__all__ = [
    "NormalDistribution",
    "ExponentialDistribution",
    "LaplaceDistribution",
    "LaplaceSumDistribution",
    "UniformDistribution",
    "TriangularDistribution",
    "LogNormalDistribution",
    "BinomialDistribution",
    "configure_normal_family",
    "configure_exponential_family",
    "configure_laplace_family",
    "configure_uniform_family",
    "configure_triangular_family",
    "configure_lognormal_family",
    "configure_binomial_family",
]
