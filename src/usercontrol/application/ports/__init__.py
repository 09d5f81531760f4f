"""Application ports - interfaces for external adapters."""

from usercontrol.application.ports.authenticator import Authenticator
from usercontrol.application.ports.user_repository import UserRepository

__all__ = [
    "Authenticator",
    "UserRepository",
]
