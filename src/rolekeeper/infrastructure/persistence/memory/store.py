"""In-memory state shared by all in-memory units of work."""

import asyncio
from copy import deepcopy
from dataclasses import dataclass, field
from uuid import UUID

from rolekeeper.domain.entities import ActivityLogEntry, AssignmentRecord, Role


@dataclass
class InMemoryStore:
    """Roles, activity log and assignments held in process memory."""

    roles: dict[UUID, Role] = field(default_factory=dict)
    activity_log: list[ActivityLogEntry] = field(default_factory=list)
    assignments: dict[tuple[str, UUID], AssignmentRecord] = field(default_factory=dict)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    @classmethod
    def with_roles(cls, roles: list[Role]) -> "InMemoryStore":
        return cls(roles={r.id: deepcopy(r) for r in roles})

    def snapshot(self) -> tuple:
        return deepcopy((self.roles, self.activity_log, self.assignments))

    def restore(self, snapshot: tuple) -> None:
        self.roles, self.activity_log, self.assignments = snapshot
