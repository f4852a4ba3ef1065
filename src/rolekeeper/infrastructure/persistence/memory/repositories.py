"""In-memory repository implementations."""

from copy import deepcopy
from uuid import UUID

from rolekeeper.domain.entities import ActivityLogEntry, AssignmentRecord, Role
from rolekeeper.infrastructure.persistence.memory.store import InMemoryStore


class InMemoryRoleRepository:
    """Role repository over an InMemoryStore; returns copies."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def get_by_id(self, role_id: UUID) -> Role | None:
        role = self._store.roles.get(role_id)
        return deepcopy(role) if role else None

    async def list_all(self) -> list[Role]:
        return [deepcopy(r) for r in self._store.roles.values()]

    async def create(self, role: Role) -> Role:
        self._store.roles[role.id] = deepcopy(role)
        return role

    async def update(self, role: Role) -> None:
        self._store.roles[role.id] = deepcopy(role)

    async def delete(self, role_id: UUID) -> None:
        self._store.roles.pop(role_id, None)


class InMemoryActivityLogRepository:
    """Append-only activity log."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def append(self, entry: ActivityLogEntry) -> None:
        self._store.activity_log.append(entry)

    async def list(self, role_id: UUID | None = None, limit: int = 100) -> list[ActivityLogEntry]:
        """Newest first."""
        entries = [
            e for e in reversed(self._store.activity_log)
            if role_id is None or e.role_id == role_id
        ]
        return entries[:limit]


class InMemoryAssignmentRepository:
    """Assignment index keyed by (user_id, role_id)."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def list_by_role(self, role_id: UUID) -> list[AssignmentRecord]:
        return sorted(
            (a for a in self._store.assignments.values() if a.role_id == role_id),
            key=lambda a: a.user_id,
        )

    async def count_by_role(self, role_id: UUID) -> int:
        return sum(1 for a in self._store.assignments.values() if a.role_id == role_id)

    async def add(self, records: list[AssignmentRecord]) -> int:
        added = 0
        for record in records:
            key = (record.user_id, record.role_id)
            if key not in self._store.assignments:
                self._store.assignments[key] = record
                added += 1
        return added

    async def reassign(self, role_id: UUID, replacement_role_id: UUID) -> int:
        moved = 0
        for key, record in list(self._store.assignments.items()):
            if record.role_id != role_id:
                continue
            del self._store.assignments[key]
            new_key = (record.user_id, replacement_role_id)
            if new_key not in self._store.assignments:
                self._store.assignments[new_key] = AssignmentRecord(
                    user_id=record.user_id,
                    role_id=replacement_role_id,
                    assigned_date=record.assigned_date,
                )
            moved += 1
        return moved
