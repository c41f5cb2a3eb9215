"""
Built-in discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dist.families.builtins.discrete.binomial import (
    BinomialDistribution,
    configure_binomial_family,
)

__all__ = [
    "BinomialDistribution",
    "configure_binomial_family",
]
