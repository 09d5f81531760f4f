"""Register user use case."""

from usercontrol.application.dto import CreateUserResult, RegistrationResult
from usercontrol.application.services import UserManagementService
from usercontrol.domain.entities import role_for_selection
from usercontrol.domain.exceptions import ValidationError
from usercontrol.domain.value_objects import RoleKind

CREATED_MESSAGE = "User created successfully."
DUPLICATE_MESSAGE = "Could not create user: a user with that name already exists."


class RegisterUserUseCase:
    """Register a user from form input: username, password and role selection."""

    def __init__(
        self,
        user_management: UserManagementService,
        default_role: RoleKind = RoleKind.GUEST,
    ) -> None:
        self._user_management = user_management
        self._default_role = default_role

    def execute(
        self,
        username: str | None,
        secret: str | None,
        role_selection: str | None = None,
    ) -> RegistrationResult:
        """Create the user. Raises ValidationError on missing username or password."""
        username = (username or "").strip()
        secret = secret or ""
        if not username or not secret:
            raise ValidationError("Username and password are required")

        role = role_for_selection(role_selection, default=self._default_role)
        result = self._user_management.create_user(username, secret, role)
        if result is CreateUserResult.CREATED:
            return RegistrationResult(result=result, message=CREATED_MESSAGE)
        return RegistrationResult(result=result, message=DUPLICATE_MESSAGE)
