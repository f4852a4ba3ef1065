"""Domain entities."""

from rolekeeper.domain.entities.activity_log import ActivityLogEntry
from rolekeeper.domain.entities.assignment import AssignmentRecord
from rolekeeper.domain.entities.permission import (
    DependencyEdge,
    PermissionDefinition,
    PermissionGroup,
)
from rolekeeper.domain.entities.role import ModificationStamp, Role

__all__ = [
    "ActivityLogEntry",
    "AssignmentRecord",
    "DependencyEdge",
    "ModificationStamp",
    "PermissionDefinition",
    "PermissionGroup",
    "Role",
]
