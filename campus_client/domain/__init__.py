"""Domain layer - pure client-side business concepts.

Structure:
- entities/: The authenticated identity
- value_objects/: Derived, immutable client state (progress, deadlines)
- protocols/: Ports the session manager depends on
- events/: Things that happened to the session
- errors/: API error values returned through Result types

The domain layer has NO dependencies on HTTP, storage or logging libraries.
"""
