"""
Support Intervals
=================

Immutable interval value types used as distribution supports and as
general-purpose ranges:

- :class:`RealInterval` — a real interval with configurable closure at
  each endpoint (closed, half-open, open, unbounded).
- :class:`IntSupport` — an inclusive contiguous range of integers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, ClassVar, cast, overload

import numpy as np

from pysatl_dist.errors import ParameterError
from pysatl_dist.types import BoolArray, ContinuousSupportShape1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator

_DELIMITERS = {
    ("[", "]"): (True, True),
    ("[", ")"): (True, False),
    ("(", "]"): (False, True),
    ("(", ")"): (False, False),
}


@dataclass(frozen=True, slots=True)
class RealInterval:
    """
    1D real interval with configurable closure.

    Parameters
    ----------
    lower : float, default=-inf
        Lower endpoint of the interval.
    upper : float, default=inf
        Upper endpoint of the interval.
    lower_closed : bool, default=True
        Whether the lower endpoint is included (ignored if lower = -inf).
    upper_closed : bool, default=True
        Whether the upper endpoint is included (ignored if upper = inf).

    Raises
    ------
    ParameterError
        If an endpoint is NaN or ``lower > upper``.

    Notes
    -----
    Infinite endpoints are limits, not numbers, so they are never closed.
    """

    lower: float = -inf
    upper: float = inf
    lower_closed: bool = True
    upper_closed: bool = True

    FRACTIONAL: ClassVar[RealInterval]
    UNIT: ClassVar[RealInterval]
    INFINITE: ClassVar[RealInterval]
    NON_NEGATIVE: ClassVar[RealInterval]
    NON_POSITIVE: ClassVar[RealInterval]
    POSITIVE: ClassVar[RealInterval]
    NEGATIVE: ClassVar[RealInterval]

    def __post_init__(self) -> None:
        if math.isnan(self.lower) or math.isnan(self.upper) or self.lower > self.upper:
            raise ParameterError(f"Invalid interval: [{self.lower}, {self.upper}].")

        object.__setattr__(self, "lower", float(self.lower))
        object.__setattr__(self, "upper", float(self.upper))
        if self.lower == -inf and self.lower_closed:
            object.__setattr__(self, "lower_closed", False)
        if self.upper == inf and self.upper_closed:
            object.__setattr__(self, "upper_closed", False)

    @classmethod
    def closed(cls, lower: float, upper: float) -> RealInterval:
        """Interval ``[lower, upper]``."""
        return cls(lower, upper, True, True)

    @classmethod
    def open(cls, lower: float, upper: float) -> RealInterval:
        """Interval ``(lower, upper)``."""
        return cls(lower, upper, False, False)

    @classmethod
    def left_open(cls, lower: float, upper: float) -> RealInterval:
        """Interval ``(lower, upper]``."""
        return cls(lower, upper, False, True)

    @classmethod
    def left_closed(cls, lower: float, upper: float) -> RealInterval:
        """Interval ``[lower, upper)``."""
        return cls(lower, upper, True, False)

    @classmethod
    def parse(cls, text: str) -> RealInterval:
        """
        Parse the canonical representation produced by :meth:`format`.

        Parameters
        ----------
        text : str
            Interval text such as ``"[0.0, 1.0)"``.

        Returns
        -------
        RealInterval
            The parsed interval.

        Raises
        ------
        ParameterError
            If the text is not a well-formed interval.
        """
        stripped = text.strip()
        if len(stripped) < 2:
            raise ParameterError(f"Invalid real interval: {text!r}")

        closure = _DELIMITERS.get((stripped[0], stripped[-1]))
        if closure is None:
            raise ParameterError(f"Invalid real interval delimiters: {text!r}")

        fields = stripped[1:-1].split(",")
        if len(fields) != 2:
            raise ParameterError(f"Invalid real interval: {text!r}")

        try:
            lower, upper = (float(field.replace("_", "")) for field in fields)
        except ValueError as exc:
            raise ParameterError(f"Invalid real interval: {text!r}") from exc

        return cls(lower, upper, *closure)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: RealInterval) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | RealInterval | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) or a whole interval lie within this interval.

        Parameters
        ----------
        x : Number, NumericArray or RealInterval
            Point(s) or interval to check.

        Returns
        -------
        bool or BoolArray
            True for points (or an interval) within this interval.
        """
        if isinstance(x, RealInterval):
            return self._covers_lower(x) and self._covers_upper(x)

        arr = np.asarray(x, dtype=float)

        lower_ok = (arr > self.lower) | (self.lower_closed & (arr >= self.lower))
        upper_ok = (arr < self.upper) | (self.upper_closed & (arr <= self.upper))
        result = lower_ok & upper_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    def _covers_lower(self, that: RealInterval) -> bool:
        if self.contains(that.lower):
            return True
        return self.lower == that.lower and (self.lower_closed or not that.lower_closed)

    def _covers_upper(self, that: RealInterval) -> bool:
        if self.contains(that.upper):
            return True
        return self.upper == that.upper and (self.upper_closed or not that.upper_closed)

    @property
    def width(self) -> float:
        """Distance between the endpoints (``inf`` for unbounded intervals)."""
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        """Arithmetic mean of the endpoints."""
        return 0.5 * (self.lower + self.upper)

    @property
    def is_finite(self) -> bool:
        """True if both endpoints are finite."""
        return math.isfinite(self.lower) and math.isfinite(self.upper)

    @property
    def is_empty(self) -> bool:
        """Check if the interval contains no points."""
        return self.lower == self.upper and not (self.lower_closed and self.upper_closed)

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """
        Get the topological shape of the interval.

        Returns
        -------
        ContinuousSupportShape1D
            Classification of the interval's shape.
        """
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY

        if self.lower == self.upper:
            return ContinuousSupportShape1D.SINGLE_POINT

        if self.lower == -inf and self.upper == inf:
            return ContinuousSupportShape1D.REAL_LINE
        if self.lower == -inf:
            return ContinuousSupportShape1D.RAY_LEFT
        if self.upper == inf:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL

    def bound(self, x: float) -> float:
        """
        Clamp a value into this interval.

        Open endpoints map to the nearest representable interior value.
        """
        lowest = self.lower if self.lower_closed else float(np.nextafter(self.lower, inf))
        highest = self.upper if self.upper_closed else float(np.nextafter(self.upper, -inf))
        return min(max(float(x), lowest), highest)

    def validate(self, value: float, description: str) -> None:
        """
        Raise :class:`ParameterError` unless ``value`` lies in this interval.

        Parameters
        ----------
        value : float
            Value to check.
        description : str
            Name used in the error message.
        """
        if not self.contains(value):
            raise ParameterError(f"Invalid {description}: must lie in {self}.", description, value)

    def format(self) -> str:
        """Canonical text form, e.g. ``"[0.0, 1.0)"``."""
        left = "[" if self.lower_closed else "("
        right = "]" if self.upper_closed else ")"
        return f"{left}{self.lower!r}, {self.upper!r}{right}"

    def __str__(self) -> str:
        return self.format()


RealInterval.FRACTIONAL = RealInterval.closed(0.0, 1.0)
RealInterval.UNIT = RealInterval.closed(-1.0, 1.0)
RealInterval.INFINITE = RealInterval.closed(-inf, inf)
RealInterval.NON_NEGATIVE = RealInterval.closed(0.0, inf)
RealInterval.NON_POSITIVE = RealInterval.closed(-inf, 0.0)
RealInterval.POSITIVE = RealInterval.left_open(0.0, inf)
RealInterval.NEGATIVE = RealInterval.left_closed(-inf, 0.0)


INT_MIN = -(2**31)
"""Smallest integer bound used by the unbounded integer supports."""

INT_MAX = 2**31 - 1
"""Largest integer bound used by the unbounded integer supports."""


@dataclass(frozen=True, slots=True)
class IntSupport:
    """
    Inclusive contiguous range of integers ``[lower, upper]``.

    Parameters
    ----------
    lower : int
        Inclusive lower bound.
    upper : int
        Inclusive upper bound.

    Raises
    ------
    ParameterError
        Unless ``lower <= upper``.
    """

    lower: int
    upper: int

    ALL: ClassVar[IntSupport]
    NEGATIVE: ClassVar[IntSupport]
    NON_NEGATIVE: ClassVar[IntSupport]
    NON_POSITIVE: ClassVar[IntSupport]
    POSITIVE: ClassVar[IntSupport]

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ParameterError(f"Invalid interval: [{self.lower}, {self.upper}].")

    @classmethod
    def over(cls, lower: int, upper: int) -> IntSupport:
        """Create the inclusive range ``[lower, upper]``."""
        return cls(int(lower), int(upper))

    @classmethod
    def parse(cls, text: str) -> IntSupport:
        """
        Parse the canonical representation ``"[lower, upper]"``.

        Raises
        ------
        ParameterError
            If the text is not a well-formed integer range.
        """
        stripped = text.strip()
        if len(stripped) < 2 or stripped[0] != "[" or stripped[-1] != "]":
            raise ParameterError(f"Invalid integer range: {text!r}")

        fields = stripped[1:-1].split(",")
        if len(fields) != 2:
            raise ParameterError(f"Invalid integer range: {text!r}")

        try:
            lower, upper = (int(field) for field in fields)
        except ValueError as exc:
            raise ParameterError(f"Invalid integer range: {text!r}") from exc

        return cls.over(lower, upper)

    def contains(self, value: int | IntSupport) -> bool:
        """
        Check whether an integer or a whole range lies within this range.
        """
        if isinstance(value, IntSupport):
            return self.contains(value.lower) and self.contains(value.upper)
        return self.lower <= value <= self.upper

    def __contains__(self, value: object) -> bool:
        return self.contains(cast(int, value))

    @property
    def size(self) -> int:
        """Number of integers in this range."""
        return self.upper - self.lower + 1

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_range())

    def to_range(self) -> range:
        """Python ``range`` over the same integers."""
        return range(self.lower, self.upper + 1)

    def format(self) -> str:
        """Canonical text form, e.g. ``"[0, 10]"``."""
        return f"[{self.lower}, {self.upper}]"

    def __str__(self) -> str:
        return self.format()


IntSupport.ALL = IntSupport.over(INT_MIN, INT_MAX)
IntSupport.NEGATIVE = IntSupport.over(INT_MIN, -1)
IntSupport.NON_NEGATIVE = IntSupport.over(0, INT_MAX)
IntSupport.NON_POSITIVE = IntSupport.over(INT_MIN, 0)
IntSupport.POSITIVE = IntSupport.over(1, INT_MAX)


__all__ = [
    "RealInterval",
    "IntSupport",
    "INT_MIN",
    "INT_MAX",
]
