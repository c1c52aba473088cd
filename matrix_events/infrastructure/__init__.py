"""Infrastructure layer - Concrete implementations of ports."""

from .config import ListenerRegistryConfig, LogContext
from .in_memory_listener_registry import InMemoryListenerRegistry
from .in_memory_metrics import InMemoryMetrics
from .simple_logger import SimpleLogger

__all__ = [
    "InMemoryListenerRegistry",
    "InMemoryMetrics",
    "ListenerRegistryConfig",
    "LogContext",
    "SimpleLogger",
]
