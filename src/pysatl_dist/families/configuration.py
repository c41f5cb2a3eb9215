"""
Distribution Families Configuration
===================================

This module wires the built-in parametric families into the global
:class:`ParametricFamilyRegister`:

- Normal, Exponential, Laplace, ContinuousUniform, Triangular and
  LogNormal continuous families.
- Binomial discrete family.

Notes
-----
- Configuration is idempotent and cached; :func:`reset_families_register`
  clears both the cache and the register.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_dist.families.builtins import (
    configure_binomial_family,
    configure_exponential_family,
    configure_laplace_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_triangular_family,
    configure_uniform_family,
)
from pysatl_dist.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register all built-in distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_exponential_family()
    configure_laplace_family()
    configure_uniform_family()
    configure_triangular_family()
    configure_lognormal_family()
    configure_binomial_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()


__all__ = ["configure_families_register", "reset_families_register"]
