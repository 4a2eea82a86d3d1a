"""Authenticated user profile.

The backend owns the user shape; the client treats it as pass-through data
and only reads the handful of fields it needs for gating (role, verification,
blocked flag). Everything else stays available through `raw`.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from campus_client.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class UserProfile:
    """Identity of the logged-in user as returned by the backend.

    Attributes:
        id: User identifier (`id` or Mongo-style `_id`).
        name: Display name.
        email: Email address.
        role: Raw role string from the payload.
        is_verified: Whether an admin verified the account.
        is_blocked: Whether an admin blocked the account.
        profile: Role-specific profile block (department, company, ...).
        raw: The complete payload, untouched.
    """

    id: str | None = None
    name: str | None = None
    email: str | None = None
    role: str | None = None
    is_verified: bool = False
    is_blocked: bool = False
    profile: dict[str, Any] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "UserProfile":
        """Build a profile from a backend user object.

        Args:
            payload: The `user` object of an auth response.

        Returns:
            UserProfile wrapping the payload.

        Raises:
            ValueError: If payload is not a mapping.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(
                f"User payload must be an object, got {type(payload).__name__}"
            )

        user_id = payload.get("id", payload.get("_id"))
        profile = payload.get("profile")

        return cls(
            id=str(user_id) if user_id is not None else None,
            name=payload.get("name"),
            email=payload.get("email"),
            role=payload.get("role"),
            is_verified=payload.get("isVerified") is True,
            is_blocked=payload.get("isBlocked") is True,
            profile=dict(profile) if isinstance(profile, Mapping) else {},
            raw=dict(payload),
        )

    @property
    def user_role(self) -> UserRole | None:
        """Role as enum, or None when the backend sent an unknown role."""
        if self.role is not None and UserRole.is_valid(self.role):
            return UserRole(self.role)
        return None
