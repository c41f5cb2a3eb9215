"""
Parametrization classes and constraint validation for distribution families.

A parametrization is a frozen dataclass naming one way of specifying the
parameters of a family (for example a Laplace scale given natively or as a
standard deviation). Constraint predicates are attached with
:func:`constraint` and checked by :meth:`Parametrization.validate`; every
parametrization converts itself to the family's base parametrization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_dist.errors import ParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_dist.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Predicate returning True if the constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    The family and name attributes and the constraint list are attached by
    the :func:`parametrization` decorator.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[str]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", None)
        if fields:
            return {f: getattr(self, f) for f in fields}
        ann = getattr(self, "__annotations__", {})
        return {k: getattr(self, k) for k in ann}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every constraint of this parametrization.

        Raises
        ------
        ParameterError
            Naming the first constraint that does not hold.
        """
        check_constraints(self, self._constraints)

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        The base implementation returns ``self``; alternative
        parametrizations override it.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def collect_constraints(cls: type) -> list[ParametrizationConstraint]:
    """
    Collect the :func:`constraint` methods defined on a class.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    """
    constraints: list[ParametrizationConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(f"@constraint '{name}' must be an instance method")
            continue

        func = attr if isfunction(attr) else None
        if func is None:
            continue
        if getattr(func, "__is_constraint", False):
            desc = getattr(func, "__constraint_description", func.__name__)
            constraints.append(ParametrizationConstraint(description=desc, check=func))
    return constraints


def check_constraints(obj: object, constraints: list[ParametrizationConstraint]) -> None:
    """Raise :class:`ParameterError` for the first failing constraint."""
    for item in constraints:
        if not item.check(obj):
            raise ParameterError(f'Constraint "{item.description}" does not hold for {obj!r}.')


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Notes
    -----
    Converts the class to a frozen dataclass if it is not one already and
    collects its :func:`constraint` methods.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "collect_constraints",
    "check_constraints",
    "parametrization",
]
