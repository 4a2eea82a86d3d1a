"""Infrastructure layer - adapters for HTTP, storage, logging and events.

Every adapter satisfies a protocol from campus_client.domain.protocols.
"""
