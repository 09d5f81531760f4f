"""List users use case."""

from usercontrol.application.dto import UserOutput
from usercontrol.application.services import UserManagementService


class ListUsersUseCase:
    """Administrative listing of registered users, without secrets."""

    def __init__(self, user_management: UserManagementService) -> None:
        self._user_management = user_management

    def execute(self) -> list[UserOutput]:
        """Users in registration order."""
        return [UserOutput.from_user(u) for u in self._user_management.list_users()]
