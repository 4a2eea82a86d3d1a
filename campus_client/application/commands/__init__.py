"""Commands accepted by the session manager."""

from campus_client.application.commands.auth_commands import (
    ID_CARD_FIELD,
    IdCardUpload,
    LoginUser,
    RegisterUser,
)

__all__ = ["ID_CARD_FIELD", "IdCardUpload", "LoginUser", "RegisterUser"]
