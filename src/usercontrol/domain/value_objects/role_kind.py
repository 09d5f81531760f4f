"""Role variant tags."""

from enum import StrEnum


class RoleKind(StrEnum):
    """Closed set of role variants."""

    ADMINISTRATOR = "administrator"
    REGULAR_USER = "regular_user"
    GUEST = "guest"
