"""Create role use case."""

import logging
from uuid import uuid4

from rolekeeper.application.activity import record_activity, stamp
from rolekeeper.application.dto.role_dto import RoleInput
from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import Role
from rolekeeper.domain.exceptions import NotFound
from rolekeeper.domain.policies import checked_permissions, clean_name, ensure_unique_name
from rolekeeper.domain.value_objects import ActivityAction, RoleColor, RoleStatus

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a custom role, optionally cloning another role's permissions."""

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(self, actor: str, data: RoleInput) -> Role:
        """Insert the role and record RoleCreated."""
        name = clean_name(data.name)
        async with self._uow_factory() as uow:
            await uow.lock_roles()
            roles = await uow.roles.list_all()
            ensure_unique_name(roles, name)

            source = None
            if data.clone_from_role_id is not None:
                source = next((r for r in roles if r.id == data.clone_from_role_id), None)
                if source is None:
                    raise NotFound("Role", data.clone_from_role_id)
                permissions = dict(source.permissions)
            else:
                permissions = data.permissions or {}

            role = Role(
                id=uuid4(),
                name=name,
                description=(data.description or "").strip(),
                permissions=checked_permissions(self._catalog, permissions),
                is_system=False,
                user_count=0,
                last_modified=stamp(actor),
                color=data.color or RoleColor.INFO,
                status=data.status or RoleStatus.ACTIVE,
            )
            await uow.roles.create(role)
            details = f"Created role '{role.name}' with {len(role.granted)} permission(s)"
            if source is not None:
                details += f", cloned from '{source.name}'"
            await record_activity(uow, ActivityAction.ROLE_CREATED, role.id, actor, details)

        logger.info("Role %s (%s) created by %s", role.name, role.id, actor)
        return role
