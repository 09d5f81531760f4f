"""User management service - unique creation and lookup of users."""

import logging
import threading

from usercontrol.application.dto import CreateUserResult
from usercontrol.application.ports import UserRepository
from usercontrol.domain.entities import Role, User
from usercontrol.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class UserManagementService:
    """Create users with unique usernames and look them up.

    Username uniqueness is enforced here only; the repository inserts
    unconditionally. The existence check and insert run under one lock so
    concurrent callers cannot both create the same username.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository
        self._lock = threading.Lock()

    def create_user(self, username: str, secret: str, role: Role) -> CreateUserResult:
        """Create user unless the username is already taken."""
        with self._lock:
            if self._users.find_by_username(username) is not None:
                logger.info("Username already taken: %s", username)
                return CreateUserResult.DUPLICATE
            user = User(username=username, secret=secret, role=role)
            self._users.add(user)
        logger.info("Created user %s with role %s", username, role.name)
        return CreateUserResult.CREATED

    def get_user(self, username: str) -> User | None:
        """Get user by exact username, or None."""
        return self._users.find_by_username(username)

    def list_users(self) -> list[User]:
        """All users in registration order."""
        return self._users.all_users()

    def require_user(self, username: str) -> User:
        """Get user by exact username. Raises NotFound when absent."""
        user = self._users.find_by_username(username)
        if user is None:
            raise NotFound("User", username)
        return user
