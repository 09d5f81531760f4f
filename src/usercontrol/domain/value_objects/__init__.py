"""Domain value objects."""

from usercontrol.domain.value_objects.capability import Capability
from usercontrol.domain.value_objects.role_kind import RoleKind

__all__ = [
    "Capability",
    "RoleKind",
]
