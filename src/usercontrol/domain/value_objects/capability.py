"""Capability tags a role may support."""

from enum import StrEnum


class Capability(StrEnum):
    """Queryable permissions. Declaration order is the display order."""

    BASIC_ACCESS = "basic-access"
    ADMIN_MANAGEMENT = "admin-management"
    PUBLIC_VIEW = "public-view"
