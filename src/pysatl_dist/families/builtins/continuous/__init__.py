"""
Built-in continuous distribution families.

This module contains the closed-form continuous distributions, the exact
Laplace sum distribution and their parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dist.families.builtins.continuous.exponential import (
    ExponentialDistribution,
    configure_exponential_family,
)
from pysatl_dist.families.builtins.continuous.laplace import (
    LaplaceDistribution,
    configure_laplace_family,
)
from pysatl_dist.families.builtins.continuous.laplace_sum import LaplaceSumDistribution
from pysatl_dist.families.builtins.continuous.lognormal import (
    LogNormalDistribution,
    configure_lognormal_family,
)
from pysatl_dist.families.builtins.continuous.normal import (
    NormalDistribution,
    configure_normal_family,
)
from pysatl_dist.families.builtins.continuous.triangular import (
    TriangularDistribution,
    configure_triangular_family,
)
from pysatl_dist.families.builtins.continuous.uniform import (
    UniformDistribution,
    configure_uniform_family,
)

__all__ = [
    "NormalDistribution",
    "ExponentialDistribution",
    "LaplaceDistribution",
    "LaplaceSumDistribution",
    "UniformDistribution",
    "TriangularDistribution",
    "LogNormalDistribution",
    "configure_normal_family",
    "configure_exponential_family",
    "configure_laplace_family",
    "configure_uniform_family",
    "configure_triangular_family",
    "configure_lognormal_family",
]
