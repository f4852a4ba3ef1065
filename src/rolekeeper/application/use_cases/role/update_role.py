"""Update role use case."""

import logging
from dataclasses import replace
from uuid import UUID

from rolekeeper.application.activity import record_activity, stamp
from rolekeeper.application.dto.role_dto import RoleInput
from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import Role
from rolekeeper.domain.exceptions import NotFound, SystemRoleImmutable
from rolekeeper.domain.policies import (
    checked_permissions,
    clean_name,
    ensure_administrative_floor,
    ensure_unique_name,
)
from rolekeeper.domain.value_objects import ActivityAction

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Edit a custom role's name, description and optionally permissions."""

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(self, actor: str, role_id: UUID, data: RoleInput) -> Role:
        """Overwrite role fields and record RoleUpdated."""
        name = clean_name(data.name)
        async with self._uow_factory() as uow:
            await uow.lock_roles()
            roles = await uow.roles.list_all()
            role = next((r for r in roles if r.id == role_id), None)
            if role is None:
                raise NotFound("Role", role_id)
            if role.is_system:
                logger.warning("Rejected update of system role %s by %s", role.name, actor)
                raise SystemRoleImmutable(f"System role '{role.name}' cannot be modified")
            ensure_unique_name(roles, name, exclude_id=role_id)

            permissions = role.permissions
            if data.permissions is not None:
                permissions = checked_permissions(self._catalog, data.permissions)
                if self._catalog.is_administrative(role.permissions):
                    after = [replace(r, permissions=permissions) if r.id == role_id else r for r in roles]
                    ensure_administrative_floor(self._catalog, after, f"update role '{role.name}'")

            updated = replace(
                role,
                name=name,
                description=(data.description or "").strip(),
                permissions=permissions,
                version=role.version + 1,
                last_modified=stamp(actor),
                color=data.color or role.color,
                status=data.status or role.status,
            )
            await uow.roles.update(updated)
            changed = []
            if updated.name != role.name:
                changed.append(f"renamed from '{role.name}'")
            if updated.description != role.description:
                changed.append("description changed")
            if (updated.color, updated.status) != (role.color, role.status):
                changed.append("tags changed")
            if updated.permissions != role.permissions:
                changed.append(f"{len(updated.granted)} permission(s) granted")
            details = f"Updated role '{updated.name}'" + (": " + ", ".join(changed) if changed else "")
            await record_activity(uow, ActivityAction.ROLE_UPDATED, role_id, actor, details)

        logger.info("Role %s (%s) updated by %s", updated.name, role_id, actor)
        return updated
