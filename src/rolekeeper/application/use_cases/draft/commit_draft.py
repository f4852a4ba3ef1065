"""Commit draft use case."""

import logging
from dataclasses import replace

from rolekeeper.application.activity import record_activity, stamp
from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.draft import DraftSession
from rolekeeper.domain.entities import Role
from rolekeeper.domain.exceptions import (
    ConcurrentModification,
    CriticalConfirmationPending,
    EmptyPermissionSet,
    NotFound,
    SystemRoleImmutable,
)
from rolekeeper.domain.policies import checked_permissions, ensure_administrative_floor
from rolekeeper.domain.value_objects import ActivityAction, PermissionChange

logger = logging.getLogger(__name__)


def summarize_changes(changes: list[PermissionChange]) -> str:
    granted = [c.id for c in changes if c.after]
    revoked = [c.id for c in changes if not c.after]
    parts = []
    if granted:
        parts.append("granted " + ", ".join(granted))
    if revoked:
        parts.append("revoked " + ", ".join(revoked))
    return "; ".join(parts)


class CommitDraftUseCase:
    """Write a draft's working set through to the role and record it."""

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(
        self,
        session: DraftSession,
        actor: str,
        expected_base_version: int | None = None,
    ) -> Role:
        """Commit the draft. An empty diff returns the stored role untouched.

        `expected_base_version` defaults to the version the draft was opened on.
        """
        if session.pending_confirmation:
            raise CriticalConfirmationPending(session.pending_confirmation)
        expected = session.base_version if expected_base_version is None else expected_base_version
        changes = session.diff()
        working = session.working

        async with self._uow_factory() as uow:
            await uow.lock_roles()
            roles = await uow.roles.list_all()
            role = next((r for r in roles if r.id == session.role_id), None)
            if role is None:
                raise NotFound("Role", session.role_id)
            if not changes:
                return role
            if role.is_system:
                raise SystemRoleImmutable(f"System role '{role.name}' cannot be modified")
            if role.version != expected:
                logger.warning(
                    "Commit on role %s by %s rejected: version %s, expected %s",
                    role.name, actor, role.version, expected,
                )
                raise ConcurrentModification(role.id, expected, role.version)
            if not any(working.values()):
                raise EmptyPermissionSet(f"Role '{role.name}' must keep at least one permission")

            permissions = checked_permissions(self._catalog, working)
            if self._catalog.is_administrative(role.permissions):
                after = [replace(r, permissions=permissions) if r.id == role.id else r for r in roles]
                ensure_administrative_floor(self._catalog, after, f"revoke administrative permissions from '{role.name}'")

            updated = replace(
                role,
                permissions=permissions,
                version=role.version + 1,
                last_modified=stamp(actor),
            )
            await uow.roles.update(updated)
            await record_activity(
                uow,
                ActivityAction.PERMISSION_UPDATED,
                role.id,
                actor,
                f"Permissions of '{role.name}' updated: {summarize_changes(changes)}",
                at=updated.last_modified.at,
            )

        session.mark_committed(updated)
        logger.info("Permissions of role %s committed by %s (%d change(s))", role.name, actor, len(changes))
        return updated
