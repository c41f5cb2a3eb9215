"""
Core Type Definitions
=====================

Fundamental types and enumerations used throughout PySATL Dist.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import Enum, StrEnum, auto
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Probability distribution over the integers.
    CONTINUOUS : str
        Probability distribution over the reals.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for floating-point arrays."""

IntArray = NDArray[np.int64]
"""Type alias for integer arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class ContinuousSupportShape1D(Enum):
    """
    Enumeration of 1D continuous support shapes.

    Attributes
    ----------
    REAL_LINE
        Entire real line (-∞, ∞).
    RAY_LEFT
        Right-bounded ray (-∞, b] or (-∞, b).
    RAY_RIGHT
        Left-bounded ray [a, ∞) or (a, ∞).
    BOUNDED_INTERVAL
        Bounded interval [a, b], (a, b], [a, b), or (a, b).
    EMPTY
        Empty support.
    SINGLE_POINT
        Single point {a}.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


class ScaleType(StrEnum):
    """
    Ways to specify the width of a distribution.

    Attributes
    ----------
    NATIVE : str
        The scale is given in the native form of the distribution
        functions, e.g. the ``b`` parameter of a Laplace distribution.
    SDEV : str
        The scale is given as the standard deviation and the native
        scale is derived from it.
    """

    NATIVE = "native"
    SDEV = "sdev"


class FamilyName(StrEnum):
    NORMAL = "Normal"
    EXPONENTIAL = "Exponential"
    LAPLACE = "Laplace"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    TRIANGULAR = "Triangular"
    LOG_NORMAL = "LogNormal"
    BINOMIAL = "Binomial"


__all__ = [
    "Kind",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "IntArray",
    "BoolArray",
    "ScalarFunc",
    "ContinuousSupportShape1D",
    "ScaleType",
    "FamilyName",
]
