"""User entity."""

from dataclasses import dataclass, field

from usercontrol.domain.entities.role import Role
from usercontrol.domain.exceptions import InvalidConstructionArgument


@dataclass(frozen=True)
class User:
    """User - username, plaintext secret and assigned role.

    Uniqueness of username is enforced by the management service, not here.
    """

    username: str
    secret: str = field(repr=False)
    role: Role

    def __post_init__(self) -> None:
        if not isinstance(self.username, str) or not self.username:
            raise InvalidConstructionArgument("Username is required")
        if not isinstance(self.secret, str) or not self.secret:
            raise InvalidConstructionArgument("Secret is required")
        if not isinstance(self.role, Role):
            raise InvalidConstructionArgument("User role must be a Role")
