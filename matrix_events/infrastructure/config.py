"""Configuration objects for the infrastructure layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain.enums import EventDirection, ListenerErrorPolicy


class ListenerRegistryConfig(BaseModel):
    """Strongly-typed configuration for the in-memory listener registry.

    Controls the registry-level routing policies that individual listeners
    deliberately do not enforce.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
        validate_assignment=True,
    )

    # Routing policy
    deliver_sync_events: bool = Field(
        default=False,
        description="Route SYNC (initial state replay) events to listeners",
    )
    error_policy: ListenerErrorPolicy = Field(
        default=ListenerErrorPolicy.PROPAGATE,
        description="What to do when a listener callback raises",
    )

    # Observability
    enable_metrics: bool = Field(
        default=True,
        description="Count deliveries, skips and failures",
    )
    enable_debug_logging: bool = Field(
        default=False,
        description="Log every dispatched event at debug level",
    )

    def routes(self, direction: EventDirection) -> bool:
        """Whether events from this direction are offered to listeners."""
        return EventDirection(direction) is not EventDirection.SYNC or self.deliver_sync_events

    def isolates_errors(self) -> bool:
        """Check if a failing listener should not stop the fan-out."""
        return self.error_policy is ListenerErrorPolicy.ISOLATE


class LogContext(BaseModel):
    """Strongly-typed context for structured logging.

    Provides a consistent way to pass dispatch details to loggers.
    """

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
        strict=False,
        validate_assignment=True,
    )

    # Dispatch context
    event_type: str | None = Field(default=None, description="Type of the event")
    event_id: str | None = Field(default=None, description="ID of the event, if any")
    direction: str | None = Field(default=None, description="Event direction")
    owner: str | None = Field(default=None, description="repr of the listener owner")
    listener_count: int | None = Field(
        default=None, ge=0, description="Listeners registered at dispatch time"
    )

    # Operation context
    operation: str | None = Field(default=None, description="Current operation")
    component: str | None = Field(default=None, description="Component generating the log")

    # Error context
    error_code: str | None = Field(default=None, description="Structured error code")
    error_type: str | None = Field(default=None, description="Type of error encountered")

    @classmethod
    def for_event(cls, event: Any, direction: EventDirection, **kwargs: Any) -> LogContext:
        """Build a context describing an event about to be dispatched.

        Event IDs are rendered with str() so any ID type can be logged.
        """
        event_id = getattr(event, "event_id", None)
        return cls(
            event_type=getattr(event, "type", None),
            event_id=None if event_id is None else str(event_id),
            direction=EventDirection(direction).value,
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging frameworks."""
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def with_error(self, error: BaseException) -> LogContext:
        """Create a new context with error information."""
        return LogContext(
            **{
                **self.model_dump(),
                "error_code": error.__class__.__name__,
                "error_type": type(error).__module__ + "." + type(error).__name__,
            }
        )

    def with_operation(self, operation: str, component: str | None = None) -> LogContext:
        """Create a new context with operation information."""
        return LogContext(
            **{
                **self.model_dump(),
                "operation": operation,
                "component": component or self.component,
            }
        )

    def with_owner(self, owner: Any) -> LogContext:
        """Create a new context naming a listener owner."""
        return LogContext(**{**self.model_dump(), "owner": None if owner is None else repr(owner)})
