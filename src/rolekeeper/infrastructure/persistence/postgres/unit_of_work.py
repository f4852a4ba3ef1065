"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from rolekeeper.infrastructure.persistence.postgres.activity_log_repository import (
    PostgresActivityLogRepository,
)
from rolekeeper.infrastructure.persistence.postgres.assignment_repository import (
    PostgresAssignmentRepository,
)
from rolekeeper.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._roles = PostgresRoleRepository(self._conn)
        self._activity_log = PostgresActivityLogRepository(self._conn)
        self._assignments = PostgresAssignmentRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def activity_log(self) -> PostgresActivityLogRepository:
        return self._activity_log

    @property
    def assignments(self) -> PostgresAssignmentRepository:
        return self._assignments

    async def lock_roles(self) -> None:
        # Conflicts with itself and with row writes, not with plain SELECTs.
        if self._conn:
            await self._conn.execute("LOCK TABLE role IN SHARE ROW EXCLUSIVE MODE")

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
