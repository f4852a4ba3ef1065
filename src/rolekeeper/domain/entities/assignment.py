"""Assignment record - user holds role."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AssignmentRecord:
    """User `user_id` is assigned to role `role_id`."""

    user_id: str
    role_id: UUID
    assigned_date: datetime
