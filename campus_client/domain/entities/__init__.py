"""Domain entities."""

from campus_client.domain.entities.user_profile import UserProfile

__all__ = ["UserProfile"]
