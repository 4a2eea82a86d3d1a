"""In-memory token store.

Process-local implementation of TokenStoreProtocol. Nothing survives a
restart, which is what tests and throwaway scripts want.
"""


class MemoryTokenStore:
    """Bearer token held in a plain attribute.

    Usage:
        store = MemoryTokenStore()
        store.save("abc123")
        store.load()  # "abc123"
    """

    def __init__(self, token: str | None = None) -> None:
        """Initialize store, optionally pre-seeded with a token.

        Args:
            token: Token to start with (simulates a previous run).
        """
        self._token = token

    def load(self) -> str | None:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None
