"""Permission catalog entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PermissionDefinition:
    """Atomic grantable capability, defined once at catalog load."""

    id: str
    label: str
    group: str
    description: str = ""
    critical: bool = False
    administrative: bool = False


@dataclass(frozen=True)
class PermissionGroup:
    """Presentation group of permissions; `icon` is opaque to the engine."""

    name: str
    icon: str
    permissions: tuple[PermissionDefinition, ...] = field(default_factory=tuple)

    @property
    def permission_ids(self) -> list[str]:
        return [p.id for p in self.permissions]


@dataclass(frozen=True)
class DependencyEdge:
    """`permission` cannot be granted unless `requires` is granted."""

    permission: str
    requires: str
    message: str = ""
