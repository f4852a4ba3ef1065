"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from rolekeeper.domain.entities import ModificationStamp, Role
from rolekeeper.domain.value_objects import RoleColor, RoleStatus

_SELECT = (
    "SELECT r.id, r.name, r.description, r.permissions, r.is_system, r.version, "
    "r.last_modified_by, r.last_modified_at, r.color, r.status, "
    "(SELECT count(*) FROM role_assignment a WHERE a.role_id = r.id) "
    "FROM role r"
)


def _row_to_role(r: tuple) -> Role:
    return Role(
        id=r[0],
        name=r[1],
        description=r[2] or "",
        permissions=dict(r[3] or {}),
        is_system=r[4],
        version=r[5],
        last_modified=ModificationStamp(actor=r[6], at=r[7]) if r[6] else None,
        color=RoleColor(r[8]),
        status=RoleStatus(r[9]),
        user_count=r[10],
    )


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE r.id = %s", (role_id,))
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"{_SELECT} ORDER BY r.name")
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def create(self, role: Role) -> Role:
        """Create role."""
        stamp = role.last_modified
        await self._conn.execute(
            "INSERT INTO role (id, name, description, permissions, is_system, version, "
            "last_modified_by, last_modified_at, color, status) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                role.id,
                role.name,
                role.description,
                Jsonb(role.permissions),
                role.is_system,
                role.version,
                stamp.actor if stamp else None,
                stamp.at if stamp else None,
                role.color.value,
                role.status.value,
            ),
        )
        return role

    async def update(self, role: Role) -> None:
        """Update role; user_count is derived from role_assignment."""
        stamp = role.last_modified
        await self._conn.execute(
            "UPDATE role SET name=%s, description=%s, permissions=%s, version=%s, "
            "last_modified_by=%s, last_modified_at=%s, color=%s, status=%s WHERE id=%s",
            (
                role.name,
                role.description,
                Jsonb(role.permissions),
                role.version,
                stamp.actor if stamp else None,
                stamp.at if stamp else None,
                role.color.value,
                role.status.value,
                role.id,
            ),
        )

    async def delete(self, role_id: UUID) -> None:
        """Delete role."""
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))
