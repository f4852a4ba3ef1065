"""Activity log helper shared by use cases."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from rolekeeper.application.ports import UnitOfWork
from rolekeeper.domain.entities import ActivityLogEntry, ModificationStamp
from rolekeeper.domain.value_objects import ActivityAction


def stamp(actor: str) -> ModificationStamp:
    return ModificationStamp(actor=actor, at=datetime.now(UTC))


async def record_activity(
    uow: UnitOfWork,
    action: ActivityAction,
    role_id: UUID,
    actor: str,
    details: str = "",
    at: datetime | None = None,
) -> ActivityLogEntry:
    """Append one entry to the activity log."""
    entry = ActivityLogEntry(
        id=uuid4(),
        action=action,
        role_id=role_id,
        performed_by=actor,
        timestamp=at or datetime.now(UTC),
        details=details,
    )
    await uow.activity_log.append(entry)
    return entry
