"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from rolekeeper.infrastructure.persistence.memory.repositories import (
    InMemoryActivityLogRepository,
    InMemoryAssignmentRepository,
    InMemoryRoleRepository,
)
from rolekeeper.infrastructure.persistence.memory.store import InMemoryStore


class InMemoryUnitOfWork:
    """In-memory Unit of Work.

    Writers call `lock_roles()` first, which snapshots the store so rollback can
    restore it. Read-only units of work never copy the store.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._snapshot: tuple | None = None
        self.roles = InMemoryRoleRepository(store)
        self.activity_log = InMemoryActivityLogRepository(store)
        self.assignments = InMemoryAssignmentRepository(store)

    async def lock_roles(self) -> None:
        # The factory already holds the store lock for the whole unit of work.
        if self._snapshot is None:
            self._snapshot = self._store.snapshot()

    async def commit(self) -> None:
        self._snapshot = None

    async def rollback(self) -> None:
        if self._snapshot is not None:
            self._store.restore(self._snapshot)
            self._snapshot = None


def create_uow_factory(store: InMemoryStore) -> object:
    """Create UnitOfWork factory (async context manager) serialised by the store lock."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        async with store.lock:
            uow = InMemoryUnitOfWork(store)
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
