"""Repository ports."""

from rolekeeper.application.ports.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from rolekeeper.application.ports.repositories.assignment_repository import (
    AssignmentRepository,
)
from rolekeeper.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "ActivityLogRepository",
    "AssignmentRepository",
    "RoleRepository",
]
