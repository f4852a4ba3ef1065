"""Role DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from rolekeeper.domain.value_objects import PermissionChange, RoleColor, RoleStatus


@dataclass
class RoleInput:
    """Input for creating or updating a role.

    `permissions` may be partial; missing ids default to False. Unset `color`
    and `status` keep the current tags (or defaults on create).
    """

    name: str
    description: str = ""
    permissions: dict[str, bool] | None = None
    clone_from_role_id: UUID | None = None
    color: RoleColor | None = None
    status: RoleStatus | None = None


@dataclass
class CommitPreview:
    """Impact summary shown before a draft is committed."""

    role_id: UUID
    role_name: str
    changes: list[PermissionChange] = field(default_factory=list)
    affected_users: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.changes

    @property
    def granted(self) -> list[str]:
        return [c.id for c in self.changes if c.after]

    @property
    def revoked(self) -> list[str]:
        return [c.id for c in self.changes if not c.after]

    @property
    def summary(self) -> str:
        if self.is_empty:
            return "No changes"
        parts = []
        if self.revoked:
            parts.append(
                f"{self.affected_users} user(s) will lose access to {len(self.revoked)} permission(s)"
            )
        if self.granted:
            parts.append(
                f"{self.affected_users} user(s) will gain {len(self.granted)} permission(s)"
            )
        return "; ".join(parts)
