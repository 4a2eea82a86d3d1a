"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes
- Error codes and environments

The core module has NO dependencies on other client layers.
"""

from campus_client.core.enums import ErrorCode
from campus_client.core.errors import DomainError
from campus_client.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
