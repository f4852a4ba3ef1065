"""Assign users use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from rolekeeper.application.activity import record_activity
from rolekeeper.domain.entities import AssignmentRecord
from rolekeeper.domain.exceptions import NotFound, ValidationError
from rolekeeper.domain.value_objects import ActivityAction

logger = logging.getLogger(__name__)


class AssignUsersUseCase:
    """Bulk-assign users to a role and refresh its user count."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor: str, role_id: UUID, user_ids: list[str]) -> int:
        """Return the number of new assignments; already-assigned users are skipped."""
        cleaned = list(dict.fromkeys(u.strip() for u in user_ids if u and u.strip()))
        if not cleaned:
            raise ValidationError("At least one user id is required")

        async with self._uow_factory() as uow:
            await uow.lock_roles()
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            now = datetime.now(UTC)
            added = await uow.assignments.add(
                [AssignmentRecord(user_id=u, role_id=role_id, assigned_date=now) for u in cleaned]
            )
            role.user_count = await uow.assignments.count_by_role(role_id)
            await uow.roles.update(role)
            await record_activity(
                uow,
                ActivityAction.USERS_ASSIGNED,
                role_id,
                actor,
                f"{added} user(s) assigned to '{role.name}'",
                at=now,
            )

        logger.info("%d user(s) assigned to role %s by %s", added, role.name, actor)
        return added
