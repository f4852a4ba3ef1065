"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from rolekeeper.application.ports.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from rolekeeper.application.ports.repositories.assignment_repository import (
    AssignmentRepository,
)
from rolekeeper.application.ports.repositories.role_repository import RoleRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def activity_log(self) -> ActivityLogRepository: ...

    @property
    def assignments(self) -> AssignmentRepository: ...

    async def lock_roles(self) -> None:
        """Serialise writers so read-then-write invariant checks are atomic.

        Every unit of work that writes must call this before its first read.
        """
        ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
