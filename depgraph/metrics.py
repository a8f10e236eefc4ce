"""Operation counter and stopwatch attached to each algorithm run.

A fresh :class:`Metrics` is created per algorithm call and returned inside the
call's result object, so concurrent or repeated runs never share counters.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generator, Optional


@dataclass
class Metrics:
    """Operation count and elapsed wall time for one algorithm invocation.

    Attributes:
        operations: Number of counted elementary operations.
        start_ns: ``time.perf_counter_ns()`` at start, or None if never started.
        end_ns: ``time.perf_counter_ns()`` at stop, or None if still running.
    """

    operations: int = 0
    start_ns: Optional[int] = None
    end_ns: Optional[int] = None

    def increment(self, count: int = 1) -> None:
        self.operations += count

    def start(self) -> None:
        self.start_ns = time.perf_counter_ns()
        self.end_ns = None

    def stop(self) -> None:
        self.end_ns = time.perf_counter_ns()

    @contextmanager
    def timed(self) -> Generator[Metrics, None, None]:
        """Time the enclosed block; the stopwatch stops even on error."""
        self.start()
        try:
            yield self
        finally:
            self.stop()

    @property
    def elapsed_ns(self) -> int:
        """Elapsed nanoseconds between start and stop (0 if incomplete)."""
        if self.start_ns is None or self.end_ns is None:
            return 0
        return self.end_ns - self.start_ns

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000.0

    def merge(self, other: Metrics) -> None:
        """Add another run's operation count to this one."""
        self.operations += other.operations

    def to_dict(self) -> Dict[str, Any]:
        return {"operations": self.operations, "elapsed_ms": self.elapsed_ms}
