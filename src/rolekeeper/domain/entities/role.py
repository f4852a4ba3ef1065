"""Role entity for RBAC."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from rolekeeper.domain.value_objects import RoleColor, RoleStatus


@dataclass(frozen=True)
class ModificationStamp:
    """Who committed the last change to a role, and when."""

    actor: str
    at: datetime


@dataclass
class Role:
    """Role - named bundle of permission grants.

    `permissions` is total over the catalog: every known permission id has an
    entry. `version` increases with every committed mutation and backs the
    optimistic concurrency check on draft commit. `color` and `status` are
    display tags only.
    """

    id: UUID
    name: str
    description: str
    permissions: dict[str, bool] = field(default_factory=dict)
    is_system: bool = False
    user_count: int = 0
    version: int = 1
    last_modified: ModificationStamp | None = None
    color: RoleColor = RoleColor.DEFAULT
    status: RoleStatus = RoleStatus.ACTIVE

    @property
    def granted(self) -> list[str]:
        return sorted(pid for pid, on in self.permissions.items() if on)
