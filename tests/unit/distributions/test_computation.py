__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
import time

import pytest

from pysatl_dist.distributions.computation import LazyComputation
from pysatl_dist.errors import ConvergenceError


class TestLazyComputation:
    def test_computes_once(self) -> None:
        calls = []

        def factory() -> int:
            calls.append(1)
            return 42

        lazy = LazyComputation(factory)
        assert not lazy.computed
        assert lazy.get() == 42
        assert lazy() == 42
        assert lazy.computed
        assert len(calls) == 1

    def test_caches_none(self) -> None:
        calls = []

        def factory() -> None:
            calls.append(1)

        lazy: LazyComputation[None] = LazyComputation(factory)
        assert lazy.get() is None
        assert lazy.get() is None
        assert len(calls) == 1

    def test_concurrent_first_access(self) -> None:
        calls = []

        def factory() -> object:
            calls.append(1)
            time.sleep(0.01)
            return object()

        lazy = LazyComputation(factory)
        results: list[object] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(lazy.get())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(result is results[0] for result in results)

    def test_self_referencing_factory_fails(self) -> None:
        lazy: LazyComputation[int]

        def factory() -> int:
            return lazy.get() + 1

        lazy = LazyComputation(factory)

        with pytest.raises(ConvergenceError, match="being computed"):
            lazy.get()
        assert not lazy.computed

    def test_retries_after_failure(self) -> None:
        attempts = []

        def factory() -> int:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first attempt")
            return 7

        lazy = LazyComputation(factory)

        with pytest.raises(RuntimeError):
            lazy.get()
        assert lazy.get() == 7
        assert len(attempts) == 2
