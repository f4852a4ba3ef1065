"""Draft session - staged permission edits for one role."""

from dataclasses import dataclass
from uuid import UUID

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import Role
from rolekeeper.domain.exceptions import (
    CriticalConfirmationPending,
    SystemRoleImmutable,
    ValidationError,
)
from rolekeeper.domain.resolver import apply_group_toggle, apply_toggle
from rolekeeper.domain.value_objects import ConfirmationState, PermissionChange


@dataclass(frozen=True)
class ToggleResult:
    """Working set after a toggle, and the critical permission awaiting confirmation."""

    working_set: dict[str, bool]
    pending_confirmation: str | None = None


class DraftSession:
    """Working copy of a role's permissions, separate from the committed set.

    Disabling a critical permission does not touch the working set; it moves
    the session to PENDING until `confirm_critical` or `cancel_critical`.
    While PENDING, further toggles are rejected.
    """

    def __init__(self, catalog: PermissionCatalog, role: Role) -> None:
        self._catalog = catalog
        self._reset(role)

    def _reset(self, role: Role) -> None:
        self.role_id: UUID = role.id
        self.role_name = role.name
        self.is_system = role.is_system
        self.base_version = role.version
        self._committed = self._catalog.normalize(role.permissions)
        self._working = dict(self._committed)
        self._pending: str | None = None

    @property
    def committed(self) -> dict[str, bool]:
        return dict(self._committed)

    @property
    def working(self) -> dict[str, bool]:
        return dict(self._working)

    @property
    def pending_confirmation(self) -> str | None:
        return self._pending

    @property
    def state(self) -> ConfirmationState:
        return ConfirmationState.PENDING if self._pending else ConfirmationState.IDLE

    @property
    def is_dirty(self) -> bool:
        return self._working != self._committed

    def _ensure_editable(self) -> None:
        if self.is_system:
            raise SystemRoleImmutable(f"System role '{self.role_name}' cannot be modified")
        if self._pending:
            raise CriticalConfirmationPending(self._pending)

    def toggle(self, permission_id: str) -> ToggleResult:
        self._ensure_editable()
        definition = self._catalog.get(permission_id)
        if self._working[permission_id] and definition.critical:
            self._pending = permission_id
            return ToggleResult(self.working, pending_confirmation=permission_id)
        self._working = apply_toggle(self._catalog, self._working, permission_id)
        return ToggleResult(self.working)

    def toggle_group(self, group_name: str) -> dict[str, bool]:
        # Group toggles are not gated by critical confirmation.
        self._ensure_editable()
        group = self._catalog.group(group_name)
        self._working = apply_group_toggle(self._catalog, self._working, group.permission_ids)
        return self.working

    def confirm_critical(self, permission_id: str | None = None) -> dict[str, bool]:
        if self._pending is None:
            raise ValidationError("No critical permission change awaiting confirmation")
        if permission_id is not None and permission_id != self._pending:
            raise ValidationError(
                f"Confirmation for '{permission_id}' does not match pending '{self._pending}'"
            )
        pending, self._pending = self._pending, None
        if self._working[pending]:
            self._working = apply_toggle(self._catalog, self._working, pending)
        return self.working

    def cancel_critical(self) -> dict[str, bool]:
        self._pending = None
        return self.working

    def diff(self) -> list[PermissionChange]:
        """Every permission whose working value differs from the committed one."""
        return [
            PermissionChange(
                id=pid,
                label=self._catalog.get(pid).label,
                before=self._committed[pid],
                after=self._working[pid],
            )
            for pid in self._catalog.ids
            if self._committed[pid] != self._working[pid]
        ]

    def discard(self) -> dict[str, bool]:
        self._working = dict(self._committed)
        self._pending = None
        return self.working

    def mark_committed(self, role: Role) -> None:
        """Rebase on the freshly committed role; the session becomes clean."""
        self._reset(role)
