"""Delete role use case."""

import logging
from uuid import UUID

from rolekeeper.application.activity import record_activity
from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.exceptions import NotFound, ReplacementRequired, SystemRoleImmutable
from rolekeeper.domain.policies import ensure_administrative_floor
from rolekeeper.domain.value_objects import ActivityAction

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a custom role, moving its users to a replacement role."""

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(
        self,
        actor: str,
        role_id: UUID,
        replacement_role_id: UUID | None = None,
    ) -> None:
        """Remove role. Checks run in order: system, administrative floor, replacement."""
        async with self._uow_factory() as uow:
            await uow.lock_roles()
            roles = await uow.roles.list_all()
            role = next((r for r in roles if r.id == role_id), None)
            if role is None:
                raise NotFound("Role", role_id)
            if role.is_system:
                logger.warning("Rejected delete of system role %s by %s", role.name, actor)
                raise SystemRoleImmutable(f"System role '{role.name}' cannot be deleted")

            remaining = [r for r in roles if r.id != role_id]
            if self._catalog.is_administrative(role.permissions):
                ensure_administrative_floor(self._catalog, remaining, f"delete role '{role.name}'")

            user_count = await uow.assignments.count_by_role(role_id)
            replacement = None
            if user_count > 0:
                if replacement_role_id is not None:
                    replacement = next((r for r in remaining if r.id == replacement_role_id), None)
                if replacement is None:
                    raise ReplacementRequired(
                        f"Role '{role.name}' has {user_count} assigned user(s); "
                        "choose a different existing role to reassign them to",
                        user_count,
                    )
                await uow.assignments.reassign(role_id, replacement.id)
                replacement.user_count = await uow.assignments.count_by_role(replacement.id)
                await uow.roles.update(replacement)

            await uow.roles.delete(role_id)
            details = f"Deleted role '{role.name}'"
            if replacement is not None:
                details += f"; {user_count} user(s) reassigned to '{replacement.name}'"
            await record_activity(uow, ActivityAction.ROLE_DELETED, role_id, actor, details)

        logger.info("Role %s (%s) deleted by %s", role.name, role_id, actor)
