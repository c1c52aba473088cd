"""In-memory metrics implementation.

Depends only on the metrics port. Safe to update from several dispatching
threads at once.
"""

import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Any

from ..ports.metrics import MetricsPort


@dataclass
class DurationStats:
    """Running count, mean and worst case of observed durations in ms."""

    count: int = 0
    total_ms: float = 0.0
    max_ms: float = 0.0

    def observe(self, milliseconds: float) -> None:
        self.count += 1
        self.total_ms += milliseconds
        self.max_ms = max(self.max_ms, milliseconds)

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.count if self.count else 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "count": self.count,
            "average_ms": round(self.average_ms, 3),
            "max_ms": round(self.max_ms, 3),
        }


class InMemoryMetrics(MetricsPort):
    """In-memory implementation of the MetricsPort."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: dict[str, int] = defaultdict(int)
        self._gauges: dict[str, float] = {}
        self._durations: dict[str, DurationStats] = defaultdict(DurationStats)

    def increment(self, name: str, value: int = 1) -> None:
        with self._lock:
            self._counters[name] += value

    def gauge(self, name: str, value: float) -> None:
        with self._lock:
            self._gauges[name] = value

    def observe_duration(self, name: str, milliseconds: float) -> None:
        with self._lock:
            self._durations[name].observe(milliseconds)

    def counter(self, name: str) -> int:
        """Current value of a counter, 0 if never incremented."""
        with self._lock:
            return self._counters.get(name, 0)

    def get_all(self) -> dict[str, Any]:
        """Snapshot as ``{"counters", "gauges", "durations"}``."""
        with self._lock:
            return {
                "counters": dict(self._counters),
                "gauges": dict(self._gauges),
                "durations": {name: stats.to_dict() for name, stats in self._durations.items()},
            }

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._gauges.clear()
            self._durations.clear()
