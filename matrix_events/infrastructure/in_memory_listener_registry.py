"""In-memory listener registry.

Holds listeners in registration order and fans each incoming event out to
them. Membership changes are serialized with a lock; callbacks run outside
the lock on the dispatching thread, so a callback may add or remove
listeners while an event is being dispatched. Such changes apply from the
next event on.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from ..domain.enums import DeliveryOutcome, EventDirection
from ..domain.exceptions import InvalidArgumentError
from ..domain.listener import EventListener
from ..domain.models import DispatchResult, ListenerFailure
from ..domain.types import EventCallback, EventProtocol
from ..ports.listener_registry import ListenerRegistryPort
from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort
from .config import ListenerRegistryConfig, LogContext
from .in_memory_metrics import InMemoryMetrics


class InMemoryListenerRegistry(ListenerRegistryPort):
    """Listener registry keeping everything in process memory."""

    COMPONENT = "listener_registry"

    def __init__(
        self,
        config: ListenerRegistryConfig | None = None,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
        owner: Any = None,
    ):
        """Initialize the registry.

        Args:
            config: Routing and error policies (default: ListenerRegistryConfig())
            logger: Optional logger
            metrics: Metrics sink, an InMemoryMetrics is created if omitted
            owner: Default owner for listeners registered without one, usually
                the session or room object holding this registry
        """
        self._config = config or ListenerRegistryConfig()
        self._logger = logger
        self._metrics = metrics or InMemoryMetrics()
        self._default_owner = owner
        self._lock = threading.RLock()
        self._listeners: list[EventListener] = []

    @property
    def config(self) -> ListenerRegistryConfig:
        return self._config

    @property
    def metrics(self) -> MetricsPort:
        return self._metrics

    # Registration

    def listen_to_events(self, callback: EventCallback, owner: Any = None) -> EventListener:
        """Register a listener for all event types."""
        return self.listen_to_events_of_types(None, callback, owner=owner)

    def listen_to_events_of_types(
        self, event_types: Iterable[str] | None, callback: EventCallback, owner: Any = None
    ) -> EventListener:
        """Register a listener for the given event types.

        Raises:
            InvalidArgumentError: If the callback is missing or not callable
        """
        listener = EventListener.create(
            owner=self._default_owner if owner is None else owner,
            event_types=event_types,
            callback=callback,
        )
        return self.add_listener(listener)

    def add_listener(self, listener: EventListener) -> EventListener:
        """Register an already built listener."""
        if not isinstance(listener, EventListener):
            raise InvalidArgumentError(
                f"Expected an EventListener, got {type(listener).__name__}",
                argument="listener",
                value=listener,
            )

        with self._lock:
            self._listeners.append(listener)
            count = len(self._listeners)

        self._track_count(count)
        if self._logger:
            self._logger.debug(
                "Listener registered",
                **LogContext(
                    operation="add_listener",
                    component=self.COMPONENT,
                    listener_count=count,
                )
                .with_owner(listener.owner)
                .to_dict(),
                event_types=str(listener.type_filter),
            )
        return listener

    def remove_listener(self, listener: EventListener) -> bool:
        """Unregister a listener, matched by identity."""
        with self._lock:
            for index, registered in enumerate(self._listeners):
                if registered is listener:
                    del self._listeners[index]
                    break
            else:
                return False
            count = len(self._listeners)

        self._track_count(count)
        if self._logger:
            self._logger.debug(
                "Listener removed",
                **LogContext(
                    operation="remove_listener",
                    component=self.COMPONENT,
                    listener_count=count,
                )
                .with_owner(listener.owner)
                .to_dict(),
            )
        return True

    def remove_listeners_for_owner(self, owner: Any) -> int:
        """Unregister every listener whose owner equals ``owner``."""
        with self._lock:
            kept = [listener for listener in self._listeners if listener.owner != owner]
            removed = len(self._listeners) - len(kept)
            self._listeners = kept
            count = len(kept)

        if removed:
            self._track_count(count)
            if self._logger:
                self._logger.debug(
                    "Listeners removed for owner",
                    **LogContext(
                        operation="remove_listeners_for_owner",
                        component=self.COMPONENT,
                        listener_count=count,
                    )
                    .with_owner(owner)
                    .to_dict(),
                    removed=removed,
                )
        return removed

    def remove_all_listeners(self) -> None:
        """Unregister all listeners."""
        with self._lock:
            removed = len(self._listeners)
            self._listeners = []

        self._track_count(0)
        if self._logger:
            self._logger.debug(
                "All listeners removed",
                **LogContext(
                    operation="remove_all_listeners",
                    component=self.COMPONENT,
                    listener_count=0,
                ).to_dict(),
                removed=removed,
            )

    @property
    def listeners(self) -> tuple[EventListener, ...]:
        """Snapshot of the registered listeners in registration order."""
        with self._lock:
            return tuple(self._listeners)

    # Dispatch

    def notify_listeners(
        self, event: EventProtocol, direction: EventDirection, context: Any = None
    ) -> DispatchResult:
        """Offer an event to every registered listener, in registration order.

        SYNC events are not routed unless ``deliver_sync_events`` is set.
        With the PROPAGATE policy the first callback exception is re-raised
        and the remaining listeners are not notified of this event; with
        ISOLATE it is logged and recorded in the result.

        Args:
            event: The new event
            direction: The origin of the event
            context: Passed unchanged to every matching callback

        Returns:
            Counts of deliveries, skips and failures for this event
        """
        direction = EventDirection(direction)
        result = DispatchResult(event_type=event.type, direction=direction)

        if not self._config.routes(direction):
            result.bypassed = True
            self._count("listeners.sync_bypassed")
            return result

        listeners = self.listeners
        if self._logger and self._config.enable_debug_logging:
            self._logger.debug(
                "Dispatching event", **self._event_context(event, direction, listeners).to_dict()
            )

        if self._config.enable_metrics:
            with self._metrics.timer("listeners.dispatch_ms"):
                self._dispatch(listeners, event, direction, context, result)
        else:
            self._dispatch(listeners, event, direction, context, result)
        return result

    def _dispatch(
        self,
        listeners: tuple[EventListener, ...],
        event: EventProtocol,
        direction: EventDirection,
        context: Any,
        result: DispatchResult,
    ) -> None:
        for listener in listeners:
            try:
                outcome = listener.notify(event, direction, context)
            except Exception as exc:
                self._count("listeners.errors")
                if not self._config.isolates_errors():
                    raise
                result.errors.append(ListenerFailure.from_exception(listener.owner, exc))
                if self._logger:
                    self._logger.exception(
                        "Listener callback failed",
                        exc_info=exc,
                        **self._event_context(event, direction, listeners)
                        .with_owner(listener.owner)
                        .with_error(exc)
                        .to_dict(),
                    )
                continue

            if outcome is DeliveryOutcome.DELIVERED:
                result.delivered += 1
                self._count("listeners.delivered")
            else:
                result.skipped += 1
                self._count("listeners.skipped")

    def _event_context(
        self,
        event: EventProtocol,
        direction: EventDirection,
        listeners: tuple[EventListener, ...],
    ) -> LogContext:
        return LogContext.for_event(
            event,
            direction,
            component=self.COMPONENT,
            operation="notify_listeners",
            listener_count=len(listeners),
        )

    def _count(self, name: str) -> None:
        if self._config.enable_metrics:
            self._metrics.increment(name)

    def _track_count(self, count: int) -> None:
        if self._config.enable_metrics:
            self._metrics.gauge("listeners.registered", count)
