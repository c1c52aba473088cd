"""Listener registry interface - Port definition for event fan-out."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from ..domain.enums import EventDirection
from ..domain.listener import EventListener
from ..domain.models import DispatchResult
from ..domain.types import EventCallback, EventProtocol


class ListenerRegistryPort(ABC):
    """Abstract interface for a collection of event listeners.

    Implementations own the listeners they hold, decide which directions are
    routed to them and what happens when one of them raises.
    """

    @abstractmethod
    def listen_to_events(self, callback: EventCallback, owner: Any = None) -> EventListener:
        """Register a listener for all event types."""
        ...

    @abstractmethod
    def listen_to_events_of_types(
        self, event_types: Iterable[str] | None, callback: EventCallback, owner: Any = None
    ) -> EventListener:
        """Register a listener for the given event types.

        ``None`` or an empty iterable registers for all types.
        """
        ...

    @abstractmethod
    def add_listener(self, listener: EventListener) -> EventListener:
        """Register an already built listener."""
        ...

    @abstractmethod
    def remove_listener(self, listener: EventListener) -> bool:
        """Unregister a listener.

        Returns:
            False if the listener was not registered
        """
        ...

    @abstractmethod
    def remove_listeners_for_owner(self, owner: Any) -> int:
        """Unregister every listener whose owner equals ``owner``.

        Returns:
            Number of listeners removed
        """
        ...

    @abstractmethod
    def remove_all_listeners(self) -> None:
        """Unregister all listeners."""
        ...

    @property
    @abstractmethod
    def listeners(self) -> tuple[EventListener, ...]:
        """Registered listeners in registration order."""
        ...

    @abstractmethod
    def notify_listeners(
        self, event: EventProtocol, direction: EventDirection, context: Any = None
    ) -> DispatchResult:
        """Offer an event to every registered listener."""
        ...

    def __len__(self) -> int:
        return len(self.listeners)
