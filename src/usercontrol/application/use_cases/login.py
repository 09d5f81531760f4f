"""Login use case."""

import logging

from usercontrol.application.dto import LoginResult, WelcomeOutput
from usercontrol.application.ports import Authenticator
from usercontrol.application.services import UserManagementService
from usercontrol.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the system!"
FAILURE_MESSAGE = "Incorrect username or password."


class LoginUseCase:
    """Look up the claimed user and verify credentials.

    On success the result carries the role name, its description and the
    descriptions of every capability the role supports. On failure the
    message is the same whether the user is unknown or the password is wrong.
    """

    def __init__(
        self,
        user_management: UserManagementService,
        authenticator: Authenticator,
        min_username_length: int = 3,
        min_password_length: int = 4,
    ) -> None:
        self._user_management = user_management
        self._authenticator = authenticator
        self._min_username_length = min_username_length
        self._min_password_length = min_password_length

    def execute(self, username: str | None, secret: str | None) -> LoginResult:
        """Authenticate. Raises ValidationError when input breaks the form rules."""
        username = (username or "").strip()
        secret = secret or ""
        self._validate(username, secret)

        user = self._user_management.get_user(username)
        if user is None or not self._authenticator.authenticate(user, username, secret):
            logger.warning("Failed login for %s", username)
            return LoginResult(authenticated=False, message=FAILURE_MESSAGE)

        logger.info("User %s logged in", username)
        welcome = WelcomeOutput(
            username=user.username,
            role_name=user.role.name,
            role_description=user.role.description,
            capabilities=user.role.capability_descriptions(),
        )
        return LoginResult(authenticated=True, message=WELCOME_MESSAGE, welcome=welcome)

    def _validate(self, username: str, secret: str) -> None:
        if not username:
            raise ValidationError("Username is required")
        if len(username) < self._min_username_length:
            raise ValidationError(
                f"Username must be at least {self._min_username_length} characters"
            )
        if not secret:
            raise ValidationError("Password is required")
        if len(secret) < self._min_password_length:
            raise ValidationError(
                f"Password must be at least {self._min_password_length} characters"
            )
