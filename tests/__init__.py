"""Test suite for the campus client.

Test structure:
- unit/: Unit tests - one layer and subject per module, collaborators mocked
- integration/: Session manager over the real HTTP client, backend mocked
  with pytest-httpx

No test touches a real network or the user's token file.
"""
