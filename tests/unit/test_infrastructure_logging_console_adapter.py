"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- error/critical flatten exception details
- Context binding
- Level filtering and JSON rendering with real structlog

Architecture:
- Mostly mocked structlog
- One end-to-end JSON rendering check through capsys
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_message_and_context(self, level):
        """Test debug/info/warning forward message and context unchanged."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)(
                "command_dispatched", command_type="AddItemToCart", event_count=1
            )

            getattr(mock_logger, level).assert_called_once_with(
                "command_dispatched",
                command_type="AddItemToCart",
                event_count=1,
            )

    def test_error_without_exception(self):
        """Test error() logs message with structured context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("dispatch_failed", handler_name="ProjectionHandler")

            mock_logger.error.assert_called_once_with(
                "dispatch_failed",
                handler_name="ProjectionHandler",
            )

    def test_error_flattens_exception(self):
        """Test error() adds error_type and error_message."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("dispatch_failed", error=RuntimeError("boom"), event_id="e-1")

            mock_logger.error.assert_called_once_with(
                "dispatch_failed",
                event_id="e-1",
                error_type="RuntimeError",
                error_message="boom",
            )

    def test_critical_flattens_exception(self):
        """Test critical() adds error_type and error_message."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("registry_corrupted", error=KeyError("sync"))

            mock_logger.critical.assert_called_once_with(
                "registry_corrupted",
                error_type="KeyError",
                error_message="'sync'",
            )


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test ConsoleAdapter context binding methods."""

    def test_bind_returns_new_adapter_with_bound_context(self):
        """Test bind() returns new adapter with additional context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_bound_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger
            mock_logger.bind.return_value = mock_bound_logger

            adapter = ConsoleAdapter()
            bound_adapter = adapter.bind(component="event_fanout_engine")

            mock_logger.bind.assert_called_once_with(component="event_fanout_engine")
            assert bound_adapter is not adapter
            assert bound_adapter._logger == mock_bound_logger

    def test_with_context_is_alias_for_bind(self):
        """Test with_context() returns new adapter (alias for bind)."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_bound_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger
            mock_logger.bind.return_value = mock_bound_logger

            adapter = ConsoleAdapter()
            context_adapter = adapter.with_context(command_type="AddItemToCart")

            mock_logger.bind.assert_called_once_with(command_type="AddItemToCart")
            assert context_adapter._logger == mock_bound_logger

    def test_bound_context_persists_across_logs(self):
        """Test bound logger is used for all subsequent logs."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_bound_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger
            mock_logger.bind.return_value = mock_bound_logger

            bound_adapter = ConsoleAdapter().bind(component="command_bus")
            bound_adapter.debug("command_dispatched", event_count=1)
            bound_adapter.warning("command_failed", error_code="event_handler_failed")

            mock_bound_logger.debug.assert_called_once_with(
                "command_dispatched", event_count=1
            )
            mock_bound_logger.warning.assert_called_once_with(
                "command_failed", error_code="event_handler_failed"
            )
            mock_logger.debug.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterRendering:
    """Test ConsoleAdapter with real structlog."""

    def test_json_output(self, capsys):
        """Test JSON renderer emits one parseable object per line."""
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")

        adapter.warning("async_event_handler_failed", handler_name="SearchIndexHandler")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "async_event_handler_failed"
        assert payload["handler_name"] == "SearchIndexHandler"
        assert payload["level"] == "warning"
        assert "timestamp" in payload

    def test_level_filtering(self, capsys):
        """Test messages below the configured level are dropped."""
        adapter = ConsoleAdapter(use_json=True, level="warning")

        adapter.debug("async_pass_completed", failure_count=0)
        adapter.info("dispatch_configured")

        assert capsys.readouterr().out == ""
