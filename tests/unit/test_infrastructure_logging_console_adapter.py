"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details flattened into context
- Renderer and level selection
- Credential redaction processor
- Context binding

Architecture:
- Unit tests with mocked structlog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from campus_client.infrastructure.logging import (
    REDACTED,
    ConsoleAdapter,
    redact_credentials,
)

MODULE = "campus_client.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("session_restored", user_id="u1")

            getattr(mock_logger, level).assert_called_once_with(
                "session_restored", user_id="u1"
            )

    def test_error_flattens_exception(self):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("token_store_failed", error=OSError("disk full"), path="/tmp/x")

            mock_logger.error.assert_called_once_with(
                "token_store_failed",
                path="/tmp/x",
                error_type="OSError",
                error_message="disk full",
            )

    def test_critical_without_exception(self):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("unexpected_state")

            mock_logger.critical.assert_called_once_with("unexpected_state")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    def test_json_renderer_selected(self):
        with patch(MODULE) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_by_default(self):
        with patch(MODULE) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_redaction_runs_first(self):
        with patch(MODULE) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[0] is redact_credentials

    def test_logger_name(self):
        with patch(MODULE) as mock_structlog:
            ConsoleAdapter(name="campus_worker")

            mock_structlog.get_logger.assert_called_once_with("campus_worker")

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("bogus", logging.INFO)],
    )
    def test_level_filter(self, level, expected):
        with patch(MODULE) as mock_structlog:
            ConsoleAdapter(level=level)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(expected)


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(request_id="r1")
            bound.info("campus_api_succeeded")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(request_id="r1")
            bound_logger.info.assert_called_once_with("campus_api_succeeded")

    def test_with_context_alias(self):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(user_id="u1")

            mock_logger.bind.assert_called_once_with(user_id="u1")


@pytest.mark.unit
class TestRedactCredentials:
    def test_masks_credential_keys(self):
        event = {
            "event": "user_login_attempted",
            "email": "a@b.com",
            "password": "secret",
            "Authorization": "Bearer tok1",
            "token": "tok1",
        }

        result = redact_credentials(None, "info", event)

        assert result == {
            "event": "user_login_attempted",
            "email": "a@b.com",
            "password": REDACTED,
            "Authorization": REDACTED,
            "token": REDACTED,
        }

    def test_leaves_missing_values_alone(self):
        event = {"event": "session_restore_skipped", "token": None}

        assert redact_credentials(None, "debug", event) == event
