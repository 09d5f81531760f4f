"""Role entity - tagged variants with fixed capability sets."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from usercontrol.domain.exceptions import InvalidConstructionArgument
from usercontrol.domain.value_objects import Capability, RoleKind


@dataclass(frozen=True)
class Role:
    """Role - named access level exposing capability descriptions.

    The variant is identified by ``kind``. ``description`` is the fixed,
    read-only summary of the role's access level. ``capabilities`` maps each
    supported capability tag to the fixed text its query returns. Missing
    tags are unsupported capabilities, not errors.
    """

    kind: RoleKind
    name: str
    description: str
    capabilities: Mapping[Capability, str] = field(hash=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidConstructionArgument("Role name is required")
        if not self.description:
            raise InvalidConstructionArgument("Role description is required")
        if Capability.BASIC_ACCESS not in self.capabilities:
            raise InvalidConstructionArgument(
                f"Role {self.name!r} must support {Capability.BASIC_ACCESS}"
            )
        if not all(self.capabilities.values()):
            raise InvalidConstructionArgument(
                f"Role {self.name!r} has an empty capability description"
            )
        object.__setattr__(self, "capabilities", MappingProxyType(dict(self.capabilities)))

    def supports(self, capability: Capability) -> bool:
        """Whether this role exposes the capability."""
        return capability in self.capabilities

    def query(self, capability: Capability) -> str | None:
        """Description for capability, or None when unsupported."""
        return self.capabilities.get(capability)

    def supported_capabilities(self) -> tuple[Capability, ...]:
        """Supported capability tags in canonical order."""
        return tuple(c for c in Capability if c in self.capabilities)

    def capability_descriptions(self) -> list[str]:
        """Descriptions of supported capabilities in canonical order."""
        return [self.capabilities[c] for c in self.supported_capabilities()]


def administrator() -> Role:
    return Role(
        kind=RoleKind.ADMINISTRATOR,
        name="Administrator",
        description="Full system access",
        capabilities={
            Capability.BASIC_ACCESS: "General access granted",
            Capability.ADMIN_MANAGEMENT: "User management enabled",
        },
    )


def regular_user() -> Role:
    return Role(
        kind=RoleKind.REGULAR_USER,
        name="Regular User",
        description="Basic access granted",
        capabilities={
            Capability.BASIC_ACCESS: "Access to basic functions",
        },
    )


def guest() -> Role:
    return Role(
        kind=RoleKind.GUEST,
        name="Guest",
        description="Very limited access",
        capabilities={
            Capability.BASIC_ACCESS: "Read-only access",
            Capability.PUBLIC_VIEW: "Access to public view",
        },
    )


_VARIANTS: dict[RoleKind, Callable[[], Role]] = {
    RoleKind.ADMINISTRATOR: administrator,
    RoleKind.REGULAR_USER: regular_user,
    RoleKind.GUEST: guest,
}

# Labels accepted from a registration form, compared case-insensitively.
_SELECTION_LABELS: dict[str, RoleKind] = {
    "administrator": RoleKind.ADMINISTRATOR,
    "admin": RoleKind.ADMINISTRATOR,
    "regular user": RoleKind.REGULAR_USER,
    "regular_user": RoleKind.REGULAR_USER,
    "regular": RoleKind.REGULAR_USER,
    "user": RoleKind.REGULAR_USER,
    "guest": RoleKind.GUEST,
}


def role_for_kind(kind: RoleKind) -> Role:
    """Build the role variant for kind."""
    return _VARIANTS[kind]()


def role_for_selection(selection: str | None, default: RoleKind = RoleKind.GUEST) -> Role:
    """Map a role selection label to a role. Unknown labels yield the default."""
    kind = _SELECTION_LABELS.get((selection or "").strip().lower(), default)
    return role_for_kind(kind)
