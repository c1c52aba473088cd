"""Metrics port - Abstract interface for dispatch metrics.

Lets the listener registry count deliveries, skips and failures without
depending on a particular metrics backend.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class MetricsPort(ABC):
    """Abstract interface for metrics collection."""

    @abstractmethod
    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter, e.g. "listeners.delivered"."""
        ...

    @abstractmethod
    def gauge(self, name: str, value: float) -> None:
        """Set a gauge, e.g. "listeners.registered"."""
        ...

    @abstractmethod
    def observe_duration(self, name: str, milliseconds: float) -> None:
        """Record how long one operation took."""
        ...

    @abstractmethod
    def get_all(self) -> dict[str, Any]:
        """Get all metrics as a dictionary."""
        ...

    @abstractmethod
    def reset(self) -> None:
        ...

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        """Time the enclosed block, observing the duration even if it raises."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe_duration(name, (time.perf_counter() - start) * 1000)
