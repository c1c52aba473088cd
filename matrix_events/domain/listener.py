"""Event listener: a filter plus a callback, bound to an owner."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import DeliveryOutcome, EventDirection
from .exceptions import InvalidArgumentError
from .types import EventProtocol
from .value_objects import AcceptAllTypes, EventTypeFilter, event_type_filter


class EventListener(BaseModel):
    """Stores information about a listener to events handled by the SDK.

    A listener is an immutable value: its owner, its event type filter and
    its callback are fixed at construction. It does not know about other
    listeners and holds no mutable state, so ``notify`` may be called from
    any thread and re-entrantly. Keeping track of listeners and removing
    them is left to whoever created them, typically a listener registry.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    owner: Any = Field(
        default=None,
        description="Opaque identity of whoever registered the listener",
    )
    type_filter: EventTypeFilter = Field(
        default_factory=AcceptAllTypes,
        description="Event types the listener is interested in",
    )
    callback: Callable[[Any, EventDirection, Any], None] = Field(
        ...,
        description="Called as callback(event, direction, context) on match",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_listener_inputs(cls, data: Any) -> Any:
        """Require a callable callback and normalize the type filter.

        Raises InvalidArgumentError directly instead of letting pydantic wrap
        a missing callback into its own validation error.
        """
        if not isinstance(data, dict):
            return data

        callback = data.get("callback")
        if callback is None:
            raise InvalidArgumentError("A listener requires a callback", argument="callback")
        if not callable(callback):
            raise InvalidArgumentError(
                f"Listener callback must be callable, got {type(callback).__name__}",
                argument="callback",
                value=callback,
            )

        return {**data, "type_filter": event_type_filter(data.get("type_filter"))}

    @classmethod
    def create(
        cls,
        owner: Any = None,
        event_types: Any = None,
        callback: Callable[[Any, EventDirection, Any], None] | None = None,
    ) -> "EventListener":
        """Create a listener.

        Args:
            owner: Any value identifying the registrant, ``None`` included
            event_types: Type names to accept; ``None`` or empty accepts all
            callback: Function called as ``callback(event, direction, context)``

        Returns:
            The new listener

        Raises:
            InvalidArgumentError: If the callback is missing or not callable
        """
        return cls(owner=owner, type_filter=event_types, callback=callback)

    @property
    def accepts_all_types(self) -> bool:
        """Whether the listener is notified of every event type."""
        return self.type_filter.accepts_all

    def matches(self, event: EventProtocol) -> bool:
        """Check the event's type against the filter."""
        return self.type_filter.matches(event.type)

    def notify(
        self,
        event: EventProtocol,
        direction: EventDirection,
        context: Any = None,
    ) -> DeliveryOutcome:
        """Inform the listener about a new event.

        The callback fires if the event matches the type filter. Every
        direction, ``SYNC`` included, goes through the same check; whether
        sync events reach listeners at all is the dispatcher's decision.
        Exceptions raised by the callback are not caught.

        Args:
            event: The new event
            direction: The origin of the event
            context: Additional context for the event, passed through as is.
                For room events this is the room state.

        Returns:
            DELIVERED if the callback ran, SKIPPED if the event was filtered out
        """
        if not self.type_filter.matches(event.type):
            return DeliveryOutcome.SKIPPED

        self.callback(event, direction, context)
        return DeliveryOutcome.DELIVERED
