"""Domain models using Pydantic for validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import EventDirection


class Event(BaseModel):
    """A Matrix event as handed to listeners.

    Only ``type`` is needed for routing; the remaining fields are carried so
    callbacks can interpret the event without another lookup.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",  # Homeservers add fields over time
        json_schema_extra={
            "example": {
                "event_id": "$143273582443PhrSn:example.org",
                "type": "m.room.message",
                "room_id": "!jEsUZKDJdhlrceRyVU:example.org",
                "sender": "@alice:example.org",
                "content": {"msgtype": "m.text", "body": "hello"},
                "origin_server_ts": 1432735824653,
            }
        },
    )

    type: str = Field(..., min_length=1, description="Event type, e.g. m.room.message")
    event_id: str | None = Field(default=None, description="Homeserver-assigned event ID")
    room_id: str | None = Field(default=None, description="Room the event belongs to")
    sender: str | None = Field(default=None, description="User ID of the sender")
    state_key: str | None = Field(default=None, description="Set for state events")
    content: dict[str, Any] = Field(default_factory=dict, description="Event content")
    origin_server_ts: int | None = Field(
        default=None, ge=0, description="Origin server timestamp in milliseconds"
    )

    @property
    def is_state_event(self) -> bool:
        """State events carry a state key, possibly empty."""
        return self.state_key is not None


class ListenerFailure(BaseModel):
    """A listener callback that raised while an event was being dispatched."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    owner: Any = Field(default=None, description="Owner of the failing listener")
    error_type: str = Field(..., description="Class name of the raised exception")
    message: str = Field(default="", description="str() of the raised exception")
    exception: BaseException = Field(..., exclude=True, description="The raised exception")

    @classmethod
    def from_exception(cls, owner: Any, exc: BaseException) -> "ListenerFailure":
        """Record an exception raised by the listener belonging to ``owner``."""
        return cls(owner=owner, error_type=type(exc).__name__, message=str(exc), exception=exc)


class DispatchResult(BaseModel):
    """Summary of fanning one event out to a registry's listeners."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    event_type: str = Field(..., description="Type of the dispatched event")
    direction: EventDirection = Field(..., description="Direction the event came from")
    delivered: int = Field(default=0, ge=0, description="Listeners whose callback ran")
    skipped: int = Field(default=0, ge=0, description="Listeners that filtered the event out")
    bypassed: bool = Field(
        default=False, description="True if the direction is not routed to listeners"
    )
    errors: list[ListenerFailure] = Field(default_factory=list)

    @property
    def failed(self) -> int:
        """Number of listeners whose callback raised."""
        return len(self.errors)

    @property
    def ok(self) -> bool:
        """True when no listener callback raised."""
        return not self.errors
