"""Composition root."""

from dataclasses import dataclass

from usercontrol.application.ports import Authenticator, UserRepository
from usercontrol.application.services import UserManagementService
from usercontrol.application.use_cases import (
    ListUsersUseCase,
    LoginUseCase,
    RegisterUserUseCase,
)
from usercontrol.config import Settings, configure_logging, get_settings
from usercontrol.infrastructure.auth import PlaintextAuthenticator
from usercontrol.infrastructure.persistence.memory import InMemoryUserRepository


@dataclass
class UserControl:
    """Wired services handed to a presentation layer."""

    users: UserRepository
    authenticator: Authenticator
    user_management: UserManagementService
    register_user: RegisterUserUseCase
    login: LoginUseCase
    list_users: ListUsersUseCase


def create_user_control(
    settings: Settings | None = None,
    user_repository: UserRepository | None = None,
    authenticator: Authenticator | None = None,
) -> UserControl:
    """Build services with explicit dependencies. One call per application session."""
    settings = settings or get_settings()
    configure_logging(settings)

    users = user_repository if user_repository is not None else InMemoryUserRepository()
    authenticator = authenticator or PlaintextAuthenticator()
    user_management = UserManagementService(users)

    register_user = RegisterUserUseCase(
        user_management=user_management,
        default_role=settings.default_role,
    )
    login = LoginUseCase(
        user_management=user_management,
        authenticator=authenticator,
        min_username_length=settings.min_username_length,
        min_password_length=settings.min_password_length,
    )
    return UserControl(
        users=users,
        authenticator=authenticator,
        user_management=user_management,
        register_user=register_user,
        login=login,
        list_users=ListUsersUseCase(user_management),
    )
