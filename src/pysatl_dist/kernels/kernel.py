"""
Smoothing Kernels
=================

Base class of the symmetric, unimodal kernel distributions centered at zero
on ``[-1, 1]`` used by kernel density estimation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import abstractmethod

from pysatl_dist.distributions.distribution import RealDistribution
from pysatl_dist.distributions.support import RealInterval


class KernelDistribution(RealDistribution):
    """
    Kernel distribution with zero mean, median and mode on ``[-1, 1]``.

    Subclasses supply :meth:`variance` together with the vectorized
    :meth:`_cdf` and :meth:`_pdf`. Kernels are stateless, so one shared
    instance per kernel suffices.
    """

    __slots__ = ()

    @property
    def support(self) -> RealInterval:
        return RealInterval.UNIT

    def mean(self) -> float:
        return 0.0

    def median(self) -> float:
        return 0.0

    def mode(self) -> float:
        return 0.0

    @abstractmethod
    def variance(self) -> float: ...

    def sdev(self) -> float:
        return math.sqrt(self.variance())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["KernelDistribution"]
