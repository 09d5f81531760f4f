"""Pytest fixtures for user control tests."""

from __future__ import annotations

import time

import pytest

from usercontrol.application.services import UserManagementService
from usercontrol.application.use_cases import LoginUseCase, RegisterUserUseCase
from usercontrol.config import Settings
from usercontrol.domain.entities import User
from usercontrol.infrastructure.auth import PlaintextAuthenticator
from usercontrol.infrastructure.persistence.memory import InMemoryUserRepository


# --- Fake repositories ---


class SlowUserRepository(InMemoryUserRepository):
    """In-memory repository that pauses between lookup and return.

    Widens the window between the existence check and the insert so
    concurrent creators would collide without a lock.
    """

    def __init__(self, delay: float = 0.01) -> None:
        super().__init__()
        self._delay = delay

    def find_by_username(self, username: str) -> User | None:
        found = super().find_by_username(username)
        time.sleep(self._delay)
        return found


class RecordingAuthenticator:
    """Authenticator that records calls and returns a fixed answer."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.calls: list[tuple[User | None, str, str]] = []

    def authenticate(self, user: User | None, username: str, secret: str) -> bool:
        self.calls.append((user, username, secret))
        return self.answer


# --- Fixtures ---


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def authenticator() -> PlaintextAuthenticator:
    return PlaintextAuthenticator()


@pytest.fixture
def user_management(user_repository: InMemoryUserRepository) -> UserManagementService:
    return UserManagementService(user_repository)


@pytest.fixture
def register_user(user_management: UserManagementService) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_management=user_management)


@pytest.fixture
def login(
    user_management: UserManagementService,
    authenticator: PlaintextAuthenticator,
) -> LoginUseCase:
    return LoginUseCase(user_management=user_management, authenticator=authenticator)
