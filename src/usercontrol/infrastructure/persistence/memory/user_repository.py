"""In-memory user repository implementation."""

from usercontrol.domain.entities import User


class InMemoryUserRepository:
    """User repository backed by a list, lifetime of the process."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add(self, user: User) -> None:
        """Append user. Does not check for duplicates."""
        self._users.append(user)

    def find_by_username(self, username: str) -> User | None:
        """First user whose username matches exactly."""
        return next((u for u in self._users if u.username == username), None)

    def all_users(self) -> list[User]:
        """Users in insertion order."""
        return list(self._users)

    def __len__(self) -> int:
        return len(self._users)
