"""Type definitions and protocols for strong typing across the SDK.

This module provides Protocol classes and type aliases to ensure
type safety when working with events and listener callbacks.
"""

from typing import Any, Protocol

from .enums import EventDirection


class EventProtocol(Protocol):
    """Anything routable to a listener: it only needs a type name."""

    @property
    def type(self) -> str:
        """The event type name."""
        ...


class EventCallback(Protocol):
    """Protocol for listener callbacks.

    Callbacks run synchronously on the thread that dispatches the event.
    They should not return any value.
    """

    def __call__(self, event: Any, direction: EventDirection, context: Any) -> None:
        """Handle an event.

        Args:
            event: The event being delivered
            direction: Where the event came from
            context: Opaque caller-supplied object, e.g. a room state snapshot
        """
        ...
