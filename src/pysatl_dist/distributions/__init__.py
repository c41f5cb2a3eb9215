"""
Distributions subpackage

Interfaces and shared machinery for the probability distributions of
PySATL Dist:

- distribution contracts (:mod:`.distribution`);
- support intervals and integer ranges (:mod:`.support`);
- sampling strategies (:mod:`.sampling`);
- one-time lazy computations (:mod:`.computation`).

The numerical CDF engine (:mod:`.numerical`) and the sum algebra
(:mod:`.algebra`) build on the families and are exported from the top-level
package.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import LazyComputation
from .distribution import (
    DiscreteDistribution,
    RealDistribution,
    score_z,
    validate_quantile,
    validate_sdev,
)
from .sampling import (
    RejectionSamplingStrategy,
    SamplingStrategy,
    TransformSamplingStrategy,
)
from .support import IntSupport, RealInterval

__all__ = [
    # computation primitives
    "LazyComputation",
    # distribution
    "RealDistribution",
    "DiscreteDistribution",
    "score_z",
    "validate_quantile",
    "validate_sdev",
    # support
    "RealInterval",
    "IntSupport",
    # sampling
    "SamplingStrategy",
    "TransformSamplingStrategy",
    "RejectionSamplingStrategy",
]
