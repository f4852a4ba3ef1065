"""Activity log entry - append-only audit record."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from rolekeeper.domain.value_objects import ActivityAction


@dataclass(frozen=True)
class ActivityLogEntry:
    """Committed mutation: who did what to which role."""

    id: UUID
    action: ActivityAction
    role_id: UUID
    performed_by: str
    timestamp: datetime
    details: str = ""
