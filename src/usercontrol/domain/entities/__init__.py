"""Domain entities."""

from usercontrol.domain.entities.role import (
    Role,
    administrator,
    guest,
    regular_user,
    role_for_kind,
    role_for_selection,
)
from usercontrol.domain.entities.user import User

__all__ = [
    "Role",
    "User",
    "administrator",
    "guest",
    "regular_user",
    "role_for_kind",
    "role_for_selection",
]
