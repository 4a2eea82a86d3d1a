"""Client-level error handling with Railway-Oriented Programming.

Errors are plain data (frozen dataclasses), NOT exceptions. They flow back to
callers inside Failure results so forms can show a message without a
try/except around every call.

Error Hierarchy:
    DomainError (base - does NOT inherit from Exception)
    └── ApiError (see campus_client.domain.errors)
"""

from dataclasses import dataclass
from typing import Any

from campus_client.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

