"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from matrix_events.domain.enums import ListenerErrorPolicy
from matrix_events.domain.models import Event
from matrix_events.infrastructure.config import ListenerRegistryConfig
from matrix_events.infrastructure.in_memory_listener_registry import InMemoryListenerRegistry
from matrix_events.infrastructure.in_memory_metrics import InMemoryMetrics


class RecordingCallback:
    """Callback double remembering every (event, direction, context) it got."""

    def __init__(self):
        self.calls = []

    def __call__(self, event, direction, context):
        self.calls.append((event, direction, context))

    @property
    def call_count(self):
        return len(self.calls)


@pytest.fixture
def recorder():
    """Create a recording listener callback."""
    return RecordingCallback()


@pytest.fixture
def make_recorder():
    """Factory for additional recording callbacks."""
    return RecordingCallback


@pytest.fixture
def message_event():
    """An m.room.message event."""
    return Event(
        type="m.room.message",
        event_id="$message:example.org",
        room_id="!room:example.org",
        sender="@alice:example.org",
        content={"msgtype": "m.text", "body": "hello"},
        origin_server_ts=1432735824653,
    )


@pytest.fixture
def member_event():
    """An m.room.member state event."""
    return Event(
        type="m.room.member",
        event_id="$member:example.org",
        room_id="!room:example.org",
        sender="@bob:example.org",
        state_key="@bob:example.org",
        content={"membership": "join"},
    )


@pytest.fixture
def topic_event():
    """An m.room.topic state event."""
    return Event(
        type="m.room.topic",
        event_id="$topic:example.org",
        room_id="!room:example.org",
        sender="@alice:example.org",
        state_key="",
        content={"topic": "Matrix"},
    )


@pytest.fixture
def room_state():
    """Opaque context object standing in for a room state snapshot."""
    return {"members": ["@alice:example.org", "@bob:example.org"], "topic": "Matrix"}


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    mock = MagicMock()
    mock.info = MagicMock()
    mock.warning = MagicMock()
    mock.error = MagicMock()
    mock.debug = MagicMock()
    mock.exception = MagicMock()
    return mock


@pytest.fixture
def metrics():
    """Fresh in-memory metrics."""
    return InMemoryMetrics()


@pytest.fixture
def registry(mock_logger, metrics):
    """Registry with default policies."""
    return InMemoryListenerRegistry(logger=mock_logger, metrics=metrics)


@pytest.fixture
def isolating_registry(mock_logger, metrics):
    """Registry that keeps notifying listeners after one of them raises."""
    config = ListenerRegistryConfig(error_policy=ListenerErrorPolicy.ISOLATE)
    return InMemoryListenerRegistry(config=config, logger=mock_logger, metrics=metrics)
