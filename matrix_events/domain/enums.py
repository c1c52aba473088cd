"""Domain enums for type safety and consistency.

This module centralizes all enumeration types used across the SDK,
ensuring type safety and preventing string literal errors.
"""

from enum import Enum


class EventDirection(str, Enum):
    """The direction from which an incoming event is considered.

    Represents the provenance of an event handed to listeners.
    """

    FORWARDS = "forwards"  # Events coming down the live event stream
    BACKWARDS = "backwards"  # Old events requested through pagination
    SYNC = "sync"  # Initial state replay; not routed to listeners by default


class DeliveryOutcome(str, Enum):
    """Result of offering one event to one listener."""

    DELIVERED = "delivered"  # Filter matched and the callback ran
    SKIPPED = "skipped"  # Filtered out, callback not invoked


class ListenerErrorPolicy(str, Enum):
    """How a registry reacts when a listener callback raises.

    Determines whether one failing listener stops the fan-out of an event.
    """

    PROPAGATE = "propagate"  # Re-raise to the caller, remaining listeners skipped
    ISOLATE = "isolate"  # Log and record the failure, keep notifying
