"""
Lazily Computed Values
======================

:class:`LazyComputation` wraps a zero-argument factory and evaluates it at
most once. Distributions use it to hold derived state that is expensive to
build (such as a tabulated numerical CDF) but never changes afterwards.

Notes
-----
The first access is guarded by a lock, so concurrent first callers trigger
a single computation and all observe the same value. Later accesses read
the cached value without locking. An exception raised by the factory is
propagated and the computation is retried on the next access. A factory
that asks for its own value raises :class:`ConvergenceError` instead of
waiting on the lock it holds.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from collections.abc import Callable
from typing import Generic, TypeVar, cast

from pysatl_dist.errors import ConvergenceError

_UNSET = object()

T = TypeVar("T")


class LazyComputation(Generic[T]):
    """
    Compute-once, cache-thereafter value.

    Parameters
    ----------
    factory : Callable[[], T]
        Zero-argument callable producing the value.

    Attributes
    ----------
    computed : bool
        Whether the value has been produced.
    """

    __slots__ = ("_factory", "_lock", "_value", "_owner")

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: object = _UNSET
        self._owner: int | None = None

    @property
    def computed(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        """
        Return the value, computing it on first access.

        Raises
        ------
        ConvergenceError
            If the factory requests the value it is computing.
        """
        value = self._value
        if value is _UNSET:
            if self._owner == threading.get_ident():
                raise ConvergenceError("Lazy value requested while it is being computed.")
            with self._lock:
                value = self._value
                if value is _UNSET:
                    self._owner = threading.get_ident()
                    try:
                        value = self._factory()
                    finally:
                        self._owner = None
                    self._value = value
        return cast(T, value)

    def __call__(self) -> T:
        return self.get()


__all__ = ["LazyComputation"]
