"""Activity log repository port."""

from typing import Protocol
from uuid import UUID

from rolekeeper.domain.entities import ActivityLogEntry


class ActivityLogRepository(Protocol):
    """Port for the append-only activity log."""

    async def append(self, entry: ActivityLogEntry) -> None: ...

    async def list(self, role_id: UUID | None = None, limit: int = 100) -> list[ActivityLogEntry]: ...
