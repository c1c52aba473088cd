"""Domain value objects following Domain-Driven Design principles.

The event type filter is modelled as an explicit sum type: a listener either
accepts every event type or a fixed, non-empty set of type names. Making the
wildcard a variant of its own avoids the "empty list means everything"
convention leaking into calling code.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidArgumentError


class AcceptAllTypes(BaseModel):
    """Value object for a filter that lets every event type through."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def accepts_all(self) -> bool:
        """Whether the filter matches every event type."""
        return True

    def matches(self, event_type: str) -> bool:
        """Every event type matches."""
        return True

    def __str__(self) -> str:
        """String representation used in logs."""
        return "*"


class AcceptEventTypes(BaseModel):
    """Value object for a filter restricted to a set of event type names.

    Membership is exact string equality: no wildcards, no prefix matching,
    no case folding. The order the names were supplied in is not kept.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    event_types: frozenset[str] = Field(
        ...,
        min_length=1,
        description="Event type names accepted by the filter",
    )

    @field_validator("event_types", mode="before")
    @classmethod
    def coerce_event_types(cls, v: Any) -> Any:
        """Accept any iterable of names; a bare string is a single name."""
        if isinstance(v, str):
            return frozenset((v,))
        if isinstance(v, Iterable) and not isinstance(v, frozenset):
            return frozenset(v)
        return v

    @property
    def accepts_all(self) -> bool:
        """Whether the filter matches every event type."""
        return False

    def matches(self, event_type: str) -> bool:
        """Check whether the event type is one of the accepted names."""
        return event_type in self.event_types

    def __contains__(self, event_type: object) -> bool:
        """Support ``"m.room.message" in filter``."""
        return event_type in self.event_types

    def __len__(self) -> int:
        return len(self.event_types)

    def __str__(self) -> str:
        """String representation used in logs."""
        return ",".join(sorted(self.event_types))


EventTypeFilter = AcceptAllTypes | AcceptEventTypes
"""Either every event type or an explicit set of event type names."""


def event_type_filter(event_types: Iterable[str] | str | EventTypeFilter | None) -> EventTypeFilter:
    """Build a type filter from caller input.

    Args:
        event_types: ``None`` or an empty iterable for "accept all", a single
            type name, an iterable of type names, or an existing filter which
            is returned unchanged.

    Returns:
        The matching filter variant.

    Raises:
        InvalidArgumentError: If the input is not iterable or holds a
            member that is not a string.
    """
    if isinstance(event_types, AcceptAllTypes | AcceptEventTypes):
        return event_types
    if event_types is None:
        return AcceptAllTypes()
    if isinstance(event_types, str):
        return AcceptEventTypes(event_types=frozenset((event_types,)))
    if not isinstance(event_types, Iterable):
        raise InvalidArgumentError(
            f"Event types must be an iterable of strings, got {type(event_types).__name__}",
            argument="event_types",
            value=event_types,
        )

    names = frozenset(event_types)
    if not names:
        return AcceptAllTypes()

    for name in names:
        if not isinstance(name, str):
            raise InvalidArgumentError(
                f"Event type names must be strings, got {type(name).__name__}",
                argument="event_types",
                value=name,
            )
    return AcceptEventTypes(event_types=names)
