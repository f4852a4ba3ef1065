"""PostgreSQL assignment repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolekeeper.domain.entities import AssignmentRecord


class PostgresAssignmentRepository:
    """Assignment index over the role_assignment table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_role(self, role_id: UUID) -> list[AssignmentRecord]:
        """List assignments for role."""
        cur = await self._conn.execute(
            "SELECT user_id, role_id, assigned_at FROM role_assignment "
            "WHERE role_id = %s ORDER BY user_id",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [AssignmentRecord(user_id=r[0], role_id=r[1], assigned_date=r[2]) for r in rows]

    async def count_by_role(self, role_id: UUID) -> int:
        """Count users assigned to role."""
        cur = await self._conn.execute(
            "SELECT count(*) FROM role_assignment WHERE role_id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return r[0]

    async def add(self, records: list[AssignmentRecord]) -> int:
        """Insert assignments, skipping existing (user_id, role_id) pairs."""
        added = 0
        for a in records:
            cur = await self._conn.execute(
                "INSERT INTO role_assignment (user_id, role_id, assigned_at) VALUES (%s, %s, %s) "
                "ON CONFLICT (user_id, role_id) DO NOTHING",
                (a.user_id, a.role_id, a.assigned_date),
            )
            added += cur.rowcount
        return added

    async def reassign(self, role_id: UUID, replacement_role_id: UUID) -> int:
        """Move every assignment of role_id to replacement_role_id."""
        cur = await self._conn.execute(
            "INSERT INTO role_assignment (user_id, role_id, assigned_at) "
            "SELECT user_id, %s, assigned_at FROM role_assignment WHERE role_id = %s "
            "ON CONFLICT (user_id, role_id) DO NOTHING",
            (replacement_role_id, role_id),
        )
        cur = await self._conn.execute(
            "DELETE FROM role_assignment WHERE role_id = %s",
            (role_id,),
        )
        return cur.rowcount
