"""PostgreSQL activity log repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolekeeper.domain.entities import ActivityLogEntry
from rolekeeper.domain.value_objects import ActivityAction


class PostgresActivityLogRepository:
    """Append-only activity log."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, entry: ActivityLogEntry) -> None:
        """Append entry."""
        await self._conn.execute(
            "INSERT INTO activity_log (id, action, role_id, performed_by, timestamp, details) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.action.value,
                entry.role_id,
                entry.performed_by,
                entry.timestamp,
                entry.details,
            ),
        )

    async def list(self, role_id: UUID | None = None, limit: int = 100) -> list[ActivityLogEntry]:
        """List entries, newest first."""
        if role_id is None:
            cur = await self._conn.execute(
                "SELECT id, action, role_id, performed_by, timestamp, details "
                "FROM activity_log ORDER BY timestamp DESC LIMIT %s",
                (limit,),
            )
        else:
            cur = await self._conn.execute(
                "SELECT id, action, role_id, performed_by, timestamp, details "
                "FROM activity_log WHERE role_id = %s ORDER BY timestamp DESC LIMIT %s",
                (role_id, limit),
            )
        rows = await cur.fetchall()
        return [
            ActivityLogEntry(
                id=r[0],
                action=ActivityAction(r[1]),
                role_id=r[2],
                performed_by=r[3],
                timestamp=r[4],
                details=r[5] or "",
            )
            for r in rows
        ]
