"""Domain layer - Events, listeners and their filters."""

from .enums import DeliveryOutcome, EventDirection, ListenerErrorPolicy
from .exceptions import InvalidArgumentError, MatrixEventsError, ValidationError
from .listener import EventListener
from .models import DispatchResult, Event, ListenerFailure
from .types import EventCallback, EventProtocol
from .value_objects import AcceptAllTypes, AcceptEventTypes, EventTypeFilter, event_type_filter

__all__ = [
    # Filters
    "AcceptAllTypes",
    "AcceptEventTypes",
    # Enums
    "DeliveryOutcome",
    "DispatchResult",
    # Models
    "Event",
    # Types
    "EventCallback",
    "EventDirection",
    "EventListener",
    "EventProtocol",
    "EventTypeFilter",
    # Exceptions
    "InvalidArgumentError",
    "ListenerFailure",
    "ListenerErrorPolicy",
    "MatrixEventsError",
    "ValidationError",
    "event_type_filter",
]
