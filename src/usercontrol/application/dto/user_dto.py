"""User DTOs."""

from dataclasses import dataclass, field
from enum import StrEnum

from usercontrol.domain.entities import User


class CreateUserResult(StrEnum):
    """Outcome of creating a user."""

    CREATED = "created"
    DUPLICATE = "duplicate"

    def __bool__(self) -> bool:
        return self is CreateUserResult.CREATED


@dataclass
class UserOutput:
    """Output DTO for user listing. Never carries the secret."""

    username: str
    role_name: str
    role_description: str

    @classmethod
    def from_user(cls, user: User) -> "UserOutput":
        return cls(
            username=user.username,
            role_name=user.role.name,
            role_description=user.role.description,
        )


@dataclass
class WelcomeOutput:
    """What a login flow shows an authenticated user."""

    username: str
    role_name: str
    role_description: str
    capabilities: list[str] = field(default_factory=list)


@dataclass
class RegistrationResult:
    """Outcome of the registration flow."""

    result: CreateUserResult
    message: str

    @property
    def created(self) -> bool:
        return self.result is CreateUserResult.CREATED


@dataclass
class LoginResult:
    """Outcome of the login flow. welcome is None on failure."""

    authenticated: bool
    message: str
    welcome: WelcomeOutput | None = None
