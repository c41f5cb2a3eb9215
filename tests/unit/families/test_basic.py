from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

from pysatl_dist.families import ParametricFamily, Parametrization, constraint
from pysatl_dist.families.builtins import UniformDistribution
from pysatl_dist.types import Kind


class TestBaseFamily:
    def make_default_family(self, name: str = "Default") -> ParametricFamily:
        """
        Family of uniform distributions on ``[0, value]``.

        The ``alt`` parametrization takes the half-width instead.
        """

        def factory(parameters: Any) -> UniformDistribution:
            return UniformDistribution(0.0, parameters.value)

        fam = ParametricFamily(
            name=name,
            kind=Kind.CONTINUOUS,
            distr_parametrizations=["base", "alt"],
            factory=factory,
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint("value > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            half: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=2.0 * self.half)  # type: ignore[call-arg]

        return fam
