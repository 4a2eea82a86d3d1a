"""Platform user roles.

Roles gate routes and navigation in the UI and decide which registration
fields are sent.

    - STUDENT: Current student (needs admin verification)
    - ALUMNI: Graduate offering referrals (needs admin verification)
    - RECRUITER: Company recruiter posting jobs
    - ADMIN: Platform moderator

Usage:
    from campus_client.domain.enums import UserRole

    if manager.has_role(UserRole.ADMIN):
        # Admin-only navigation
"""

from enum import Enum


class UserRole(str, Enum):
    """Platform user roles.

    String Enum:
        Values match the backend wire format exactly (capitalized), so a
        member compares equal to the raw role string in a user payload.
    """

    STUDENT = "Student"
    ALUMNI = "Alumni"
    RECRUITER = "Recruiter"
    ADMIN = "Admin"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['Student', 'Alumni', 'Recruiter', 'Admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()

    @property
    def requires_verification(self) -> bool:
        """Whether accounts with this role wait for admin verification.

        Students and alumni upload an ID card and cannot use the platform
        until an admin approves them; the backend issues no token for them
        at registration.
        """
        return self in (UserRole.STUDENT, UserRole.ALUMNI)
