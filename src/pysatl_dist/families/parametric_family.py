"""
Parametric family definitions.

A :class:`ParametricFamily` groups the alternative parametrizations of one
distribution law and builds concrete distribution objects from any of them
by converting to the base parametrization first.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, dataclass_transform

from pysatl_dist.errors import ParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_dist.distributions.distribution import DiscreteDistribution, RealDistribution
    from pysatl_dist.families.parametrizations import Parametrization
    from pysatl_dist.types import Kind

    Distribution = RealDistribution | DiscreteDistribution
    DistributionFactory = Callable[[Parametrization], Distribution]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    kind : Kind
        Whether the family is continuous or discrete.
    distr_parametrizations : list[str]
        Parametrization names; the first one is the base parametrization.
    factory : Callable[[Parametrization], RealDistribution | DiscreteDistribution]
        Builds the distribution object from base parameters.
    """

    def __init__(
        self,
        name: str,
        kind: Kind,
        distr_parametrizations: list[str],
        factory: DistributionFactory,
    ):
        if not distr_parametrizations:
            raise ParameterError(f"Family '{name}' needs at least one parametrization.")

        self._name = name
        self.kind = kind
        self._factory = factory

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[str] = list(distr_parametrizations)
        self.base_parametrization_name: str = self.parametrization_names[0]

        self._parametrizations: dict[str, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[str, type[Parametrization]]:
        """Mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ParameterError
            If the base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ParameterError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self, name: str, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ParameterError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ParameterError(f"Family '{self._name}' declares no parametrization '{name}'.")
        if name in self._parametrizations:
            raise ParameterError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: str) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        ParameterError
            If the name is not registered.
        """
        try:
            return self._parametrizations[name]
        except KeyError as exc:
            raise ParameterError(
                f"Family '{self._name}' has no parametrization '{name}'.", "name", name
            ) from exc

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Distribution:
        """
        Create a distribution with the given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of the parametrization to use (defaults to the base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        RealDistribution or DiscreteDistribution
            The distribution object.

        Raises
        ------
        ParameterError
            If the parametrization is unknown, a parameter is missing or
            unexpected, or a constraint does not hold.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self.get_parametrization(parametrization_name)

        try:
            parameters = parametrization_class(**parameters_values)
        except TypeError as exc:
            raise ParameterError(f"Invalid parameters for {self._name}: {exc}") from exc

        parameters.validate()
        base_parameters = self.to_base(parameters)
        base_parameters.validate()
        return self._factory(base_parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.
        """
        from pysatl_dist.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution


__all__ = ["ParametricFamily"]
