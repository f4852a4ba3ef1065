"""Duplicate role use case."""

import logging
from uuid import UUID, uuid4

from rolekeeper.application.activity import record_activity, stamp
from rolekeeper.domain.entities import Role
from rolekeeper.domain.exceptions import NotFound
from rolekeeper.domain.policies import MAX_NAME_LENGTH, name_key
from rolekeeper.domain.value_objects import ActivityAction, RoleStatus

logger = logging.getLogger(__name__)


def copy_name(name: str, taken: set[str]) -> str:
    """'<name> (Copy)', then '<name> (Copy 2)', ... until the name is free."""
    suffix = " (Copy)"
    n = 1
    while True:
        candidate = name[: MAX_NAME_LENGTH - len(suffix)] + suffix
        if name_key(candidate) not in taken:
            return candidate
        n += 1
        suffix = f" (Copy {n})"


class DuplicateRoleUseCase:
    """Create an editable custom copy of any role, system roles included."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor: str, role_id: UUID) -> Role:
        """Copy the role's permissions under a new unique name."""
        async with self._uow_factory() as uow:
            await uow.lock_roles()
            roles = await uow.roles.list_all()
            source = next((r for r in roles if r.id == role_id), None)
            if source is None:
                raise NotFound("Role", role_id)

            role = Role(
                id=uuid4(),
                name=copy_name(source.name, {name_key(r.name) for r in roles}),
                description=source.description,
                permissions=dict(source.permissions),
                is_system=False,
                user_count=0,
                last_modified=stamp(actor),
                color=source.color,
                status=RoleStatus.ACTIVE,
            )
            await uow.roles.create(role)
            await record_activity(
                uow,
                ActivityAction.ROLE_DUPLICATED,
                role.id,
                actor,
                f"Duplicated '{source.name}' as '{role.name}'",
            )

        logger.info("Role %s duplicated as %s by %s", source.name, role.name, actor)
        return role
