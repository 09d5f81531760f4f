"""Application use cases."""

from usercontrol.application.use_cases.list_users import ListUsersUseCase
from usercontrol.application.use_cases.login import LoginUseCase
from usercontrol.application.use_cases.register_user import RegisterUserUseCase

__all__ = [
    "ListUsersUseCase",
    "LoginUseCase",
    "RegisterUserUseCase",
]
