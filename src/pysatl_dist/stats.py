"""
Sample Summaries
================

:class:`StatSummary` collects the descriptive statistics of a data sample
used by kernel bandwidth selection and by the statistical checks in the
test-suite.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from pysatl_dist.errors import ParameterError


@dataclass(frozen=True, slots=True)
class StatSummary:
    """
    Summary statistics of a data sample.

    Attributes
    ----------
    count : int
        The sample size.
    min, max : float
        Extreme sample values.
    q1, median, q3 : float
        Quartiles of the sample.
    mean : float
        The sample mean.
    variance : float
        The bias-corrected sample variance.
    """

    count: int
    min: float
    q1: float
    mean: float
    median: float
    q3: float
    max: float
    variance: float

    @classmethod
    def of(cls, sample: Iterable[float] | np.ndarray) -> StatSummary:
        """
        Summarize a data sample.

        Parameters
        ----------
        sample : array_like
            The empirical data sample; at least one observation.

        Returns
        -------
        StatSummary
            The sample summary.

        Notes
        -----
        Quartiles use the ``(n + 1) p`` plotting position (NumPy's
        ``"weibull"`` method). The variance of a single observation is 0.
        """
        arr = np.asarray(sample if isinstance(sample, np.ndarray) else list(sample), dtype=float)
        if arr.ndim != 1 or arr.size == 0:
            raise ParameterError("Sample must be a non-empty one-dimensional array.")

        q1, median, q3 = np.percentile(arr, [25.0, 50.0, 75.0], method="weibull")
        variance = float(np.var(arr, ddof=1)) if arr.size > 1 else 0.0

        return cls(
            count=int(arr.size),
            min=float(arr.min()),
            q1=float(q1),
            mean=float(arr.mean()),
            median=float(median),
            q3=float(q3),
            max=float(arr.max()),
            variance=variance,
        )

    @property
    def sd(self) -> float:
        """The sample standard deviation."""
        return math.sqrt(self.variance)

    @property
    def iqr(self) -> float:
        """The interquartile range ``q3 - q1``."""
        return self.q3 - self.q1


__all__ = ["StatSummary"]
