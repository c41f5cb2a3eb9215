"""
Exception Hierarchy
===================

Every error raised by PySATL Dist derives from :class:`DistributionError`
and from the built-in exception a caller would naturally catch, so both
``except ParameterError`` and ``except ValueError`` work.

- :class:`ParameterError` — a distribution (or helper) was given invalid
  parameters; raised eagerly at construction.
- :class:`QueryArgumentError` — a query received an argument outside its
  domain, e.g. a quantile probability outside ``[0, 1]``.
- :class:`ConvergenceError` — a numerical method exhausted its iteration
  budget or its assumptions (such as a bracketed root) did not hold.
- :class:`UnsupportedOperationError` — the operation is not applicable to
  the distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(Exception):
    """Base class for all PySATL Dist errors."""


class ParameterError(DistributionError, ValueError):
    """
    Invalid distribution parameter.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    name : str, optional
        Name of the offending parameter.
    value : object, optional
        The rejected value.
    """

    def __init__(self, message: str, name: str | None = None, value: object = None) -> None:
        self.name = name
        self.value = value
        if name is not None:
            message = f"{message} [{name}={value!r}]"
        super().__init__(message)


class QueryArgumentError(DistributionError, ValueError):
    """Invalid argument passed to a distribution query."""


class ConvergenceError(DistributionError, RuntimeError):
    """
    Numerical method failed to converge.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    iterations : int, optional
        Number of iterations performed before giving up.
    """

    def __init__(self, message: str, iterations: int | None = None) -> None:
        self.iterations = iterations
        if iterations is not None:
            message = f"{message} (after {iterations} iterations)"
        super().__init__(message)


class UnsupportedOperationError(DistributionError, NotImplementedError):
    """Operation is not applicable to the distribution."""


__all__ = [
    "DistributionError",
    "ParameterError",
    "QueryArgumentError",
    "ConvergenceError",
    "UnsupportedOperationError",
]
