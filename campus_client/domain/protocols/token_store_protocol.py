"""Token store protocol (port) for the persisted bearer credential.

The persisted token is the source of truth for "was someone logged in"
across restarts, the way browser storage is for the web client. Only the
session manager writes to it.

Implementations:
    - MemoryTokenStore: campus_client/infrastructure/storage/memory_token_store.py
    - FileTokenStore: campus_client/infrastructure/storage/file_token_store.py
"""

from typing import Protocol


class TokenStoreProtocol(Protocol):
    """Protocol for persistent bearer token storage.

    All methods are synchronous so that a token write and the matching
    in-memory state change happen inside one action, with no await between
    them. `save` and `clear` never raise: a storage failure is logged by the
    implementation and the session carries on in memory.
    """

    def load(self) -> str | None:
        """Return the persisted token, or None when nothing is stored."""
        ...

    def save(self, token: str) -> None:
        """Persist the token, replacing any previous one."""
        ...

    def clear(self) -> None:
        """Remove the persisted token. No-op when nothing is stored."""
        ...
