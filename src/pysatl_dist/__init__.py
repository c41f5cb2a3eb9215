"""
PySATL Dist
===========

Univariate probability distributions with closed-form and numerically
derived CDF, density, quantile and sampling, parametric family management,
kernel density estimation and sums of IID variables.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .kernels import *
from .kernels import __all__ as _kernels_all
from .distributions.algebra import NORMAL_SUM_THRESHOLD, simulate_sum, sum_distribution
from .distributions.numerical import NumericalCDF, NumericalRealDistribution, NumericalSettings
from .errors import *
from .errors import __all__ as _errors_all
from .root import BrentRootFinder, UnivariateRootFinder
from .stats import StatSummary
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-dist")
__all__ = [
    "__version__",
    *_distr_all,
    *_family_all,
    *_kernels_all,
    "NORMAL_SUM_THRESHOLD",
    "sum_distribution",
    "simulate_sum",
    "NumericalSettings",
    "NumericalCDF",
    "NumericalRealDistribution",
    *_errors_all,
    "UnivariateRootFinder",
    "BrentRootFinder",
    "StatSummary",
    *_types_all,
]

del _distr_all
del _family_all
del _kernels_all
del _errors_all
del _types_all
