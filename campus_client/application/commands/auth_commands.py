"""Authentication commands (user intent handed to the session manager).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). The manager executes them and returns Result types.
"""

from dataclasses import dataclass

from campus_client.domain.enums import UserRole
from campus_client.domain.protocols.auth_gateway_protocol import UploadFile

ID_CARD_FIELD = "bracuIdCard"


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Log in with email and password.

    Attributes:
        email: Account email.
        password: Account password (plain text, sent once).
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class IdCardUpload:
    """University ID card image attached to a registration.

    Attributes:
        filename: Original file name.
        content: Raw file bytes.
        content_type: MIME type (e.g., "image/jpeg").
    """

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    def as_part(self) -> UploadFile:
        return (self.filename, self.content, self.content_type)


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Create an account.

    Role-specific fields are only sent for the roles that use them:
    department, batch and the ID card for students and alumni; company and
    job title for recruiters. Values for other roles are ignored.

    Example:
        >>> command = RegisterUser(
        ...     name="Ada",
        ...     email="ada@g.bracu.ac.bd",
        ...     password="secret123",
        ...     role="Student",
        ...     department="CSE",
        ...     batch="2021",
        ... )
        >>> fields, files = command.to_multipart()
    """

    name: str
    email: str
    password: str
    role: str
    department: str | None = None
    batch: str | None = None
    company: str | None = None
    job_title: str | None = None
    id_card: IdCardUpload | None = None

    def to_multipart(self) -> tuple[dict[str, str], dict[str, UploadFile]]:
        """Build the registration form.

        Returns:
            Tuple of (text fields, file parts). Empty role-specific values
            are sent as empty strings, as a browser form would.
        """
        fields = {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "role": self.role,
        }
        files: dict[str, UploadFile] = {}

        if self.role in (UserRole.STUDENT, UserRole.ALUMNI):
            fields["department"] = self.department or ""
            fields["batch"] = self.batch or ""
            if self.id_card is not None:
                files[ID_CARD_FIELD] = self.id_card.as_part()
        elif self.role == UserRole.RECRUITER:
            fields["company"] = self.company or ""
            fields["jobTitle"] = self.job_title or ""

        return fields, files
