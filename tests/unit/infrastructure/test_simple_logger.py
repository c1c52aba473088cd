"""Tests for the SimpleLogger implementation."""

import logging
from unittest.mock import Mock, patch

import pytest

from matrix_events.infrastructure.simple_logger import SimpleLogger
from matrix_events.ports.logger import LoggerPort


class TestSimpleLogger:
    """Test cases for SimpleLogger."""

    def test_implements_logger_port(self):
        """Test that SimpleLogger implements LoggerPort."""
        assert isinstance(SimpleLogger(), LoggerPort)

    def test_initialization_defaults(self):
        """Test logger name and level defaults."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = [Mock()]
            mock_get_logger.return_value = mock_logger

            SimpleLogger()

            mock_get_logger.assert_called_once_with("matrix_events")
            mock_logger.setLevel.assert_called_once_with(logging.INFO)

    def test_handler_added_once(self):
        """Test a console handler is only added when none exists."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = []
            mock_get_logger.return_value = mock_logger

            with patch("logging.StreamHandler") as mock_handler_class:
                SimpleLogger()
                mock_logger.addHandler.assert_called_once_with(mock_handler_class.return_value)

            mock_logger.handlers = [Mock()]
            mock_logger.addHandler.reset_mock()
            SimpleLogger()
            mock_logger.addHandler.assert_not_called()

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_level_helpers_pass_context_as_extra(self, method, level):
        """Test keyword context lands on the record, not in the message."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = [Mock()]
            mock_get_logger.return_value = mock_logger

            getattr(SimpleLogger(), method)("Listener registered", event_type="m.room.message")

            mock_logger.log.assert_called_once_with(
                level,
                "Listener registered",
                exc_info=None,
                extra={
                    "context": {"event_type": "m.room.message"},
                    "context_suffix": " event_type=m.room.message",
                },
            )

    def test_exception_keeps_exc_info(self):
        """Test exception() logs at error level with the given exception."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = [Mock()]
            mock_get_logger.return_value = mock_logger
            error = ValueError("boom")

            SimpleLogger().exception("Listener callback failed", exc_info=error, owner="'me'")

            mock_logger.log.assert_called_once_with(
                logging.ERROR,
                "Listener callback failed",
                exc_info=error,
                extra={"context": {"owner": "'me'"}, "context_suffix": " owner='me'"},
            )

    def test_exception_without_exc_info_uses_current(self):
        """Test exception() falls back to the exception being handled."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = [Mock()]
            mock_get_logger.return_value = mock_logger

            SimpleLogger().exception("Listener callback failed")

            assert mock_logger.log.call_args.kwargs["exc_info"] is True

    def test_reserved_names_do_not_clash(self, caplog):
        """Test context keys named like LogRecord attributes are accepted."""
        logger = SimpleLogger(name="matrix_events.test_reserved")

        with caplog.at_level(logging.INFO, logger="matrix_events.test_reserved"):
            logger.info("Dispatching event", args="shadow", levelname="shadow")

        record = caplog.records[-1]
        assert record.getMessage() == "Dispatching event"
        assert record.context == {"args": "shadow", "levelname": "shadow"}
        assert record.levelname == "INFO"
