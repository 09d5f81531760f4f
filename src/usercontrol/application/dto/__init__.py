"""Application DTOs."""

from usercontrol.application.dto.user_dto import (
    CreateUserResult,
    LoginResult,
    RegistrationResult,
    UserOutput,
    WelcomeOutput,
)

__all__ = [
    "CreateUserResult",
    "LoginResult",
    "RegistrationResult",
    "UserOutput",
    "WelcomeOutput",
]
