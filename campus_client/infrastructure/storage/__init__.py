"""Token store adapters (TokenStoreProtocol)."""

from campus_client.infrastructure.storage.file_token_store import FileTokenStore
from campus_client.infrastructure.storage.memory_token_store import MemoryTokenStore

__all__ = ["FileTokenStore", "MemoryTokenStore"]
