"""File-backed token store.

Persists the bearer token in a small JSON object file keyed by the storage
key, the same way browser storage keeps it under `"token"`. Other keys in
the file are preserved.

A missing, unreadable or malformed file reads as "no token": a corrupt file
must never stop the client from starting logged out. Write failures (read-only
directory, a parent path that is a file) are logged and dropped; the session
then lives in memory only.
"""

import contextlib
import json
import os
from pathlib import Path
from typing import Any

import structlog

from campus_client.core.constants import TOKEN_STORAGE_KEY_DEFAULT

logger = structlog.get_logger(__name__)


class FileTokenStore:
    """Bearer token persisted in a JSON file.

    Attributes:
        path: File holding the JSON object.
        key: Key the token is stored under.

    Example:
        >>> store = FileTokenStore(Path("~/.campus/session.json").expanduser())
        >>> store.save("abc123")
        >>> FileTokenStore(store.path).load()
        'abc123'
    """

    def __init__(self, path: Path, *, key: str = TOKEN_STORAGE_KEY_DEFAULT) -> None:
        """Initialize file token store.

        Args:
            path: JSON file location (parent directories are created on save).
            key: Storage key for the token.
        """
        self.path = path
        self.key = key

    def load(self) -> str | None:
        """Return the stored token, or None."""
        token = self._read().get(self.key)
        return token if isinstance(token, str) and token else None

    def save(self, token: str) -> None:
        """Store the token, keeping other keys intact."""
        data = self._read()
        data[self.key] = token
        self._write(data, operation="save")

    def clear(self) -> None:
        """Remove the token key; no-op when absent."""
        data = self._read()
        if self.key not in data:
            return
        del data[self.key]
        self._write(data, operation="clear")

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(
                "token_store_unreadable",
                path=str(self.path),
                error=str(e),
            )
            return {}

        if not isinstance(data, dict):
            logger.warning(
                "token_store_unexpected_format",
                path=str(self.path),
                data_type=type(data).__name__,
            )
            return {}
        return data

    def _write(self, data: dict[str, Any], *, operation: str) -> None:
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Readers see either the old file or the new one
            tmp_path.write_text(json.dumps(data), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            logger.warning(
                "token_store_write_failed",
                path=str(self.path),
                operation=operation,
                error=str(e),
            )
