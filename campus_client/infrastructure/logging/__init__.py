"""Logging adapters implementing LoggerProtocol."""

from campus_client.infrastructure.logging.console_adapter import (
    REDACTED,
    ConsoleAdapter,
    redact_credentials,
)

__all__ = ["REDACTED", "ConsoleAdapter", "redact_credentials"]
