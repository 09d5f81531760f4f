"""User repository port."""

from typing import Protocol

from usercontrol.domain.entities import User


class UserRepository(Protocol):
    """Port for user storage. Backends are swappable behind these three calls."""

    def add(self, user: User) -> None: ...

    def find_by_username(self, username: str) -> User | None: ...

    def all_users(self) -> list[User]: ...
