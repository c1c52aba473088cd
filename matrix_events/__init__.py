"""matrix_events - Filtered event listeners for a Matrix client SDK."""

from .domain.enums import DeliveryOutcome, EventDirection, ListenerErrorPolicy
from .domain.exceptions import InvalidArgumentError
from .domain.listener import EventListener
from .domain.models import Event
from .infrastructure.config import ListenerRegistryConfig
from .infrastructure.in_memory_listener_registry import InMemoryListenerRegistry

__all__ = [
    "DeliveryOutcome",
    "Event",
    "EventDirection",
    "EventListener",
    "InMemoryListenerRegistry",
    "InvalidArgumentError",
    "ListenerErrorPolicy",
    "ListenerRegistryConfig",
]
__version__ = "0.1.0"
