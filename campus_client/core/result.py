"""Result types for railway-oriented programming.

Operations that can fail in expected ways (a rejected login, an unreachable
backend) return a Result instead of raising. Callers branch on the type, so
failure paths stay explicit and testable.

Usage:
    result = await manager.login("a@b.com", "secret")
    match result:
        case Success(value=outcome):
            print(outcome.user)
        case Failure(error=message):
            print(f"Login failed: {message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
