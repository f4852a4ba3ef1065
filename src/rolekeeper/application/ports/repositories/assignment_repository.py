"""Assignment repository port."""

from typing import Protocol
from uuid import UUID

from rolekeeper.domain.entities import AssignmentRecord


class AssignmentRepository(Protocol):
    """Port for the role -> users assignment index."""

    async def list_by_role(self, role_id: UUID) -> list[AssignmentRecord]: ...

    async def count_by_role(self, role_id: UUID) -> int: ...

    async def add(self, records: list[AssignmentRecord]) -> int: ...

    async def reassign(self, role_id: UUID, replacement_role_id: UUID) -> int: ...
