"""Domain value objects."""

from rolekeeper.domain.value_objects.activity_action import ActivityAction
from rolekeeper.domain.value_objects.confirmation_state import ConfirmationState
from rolekeeper.domain.value_objects.permission_change import PermissionChange
from rolekeeper.domain.value_objects.role_color import RoleColor
from rolekeeper.domain.value_objects.role_status import RoleStatus

__all__ = [
    "ActivityAction",
    "ConfirmationState",
    "PermissionChange",
    "RoleColor",
    "RoleStatus",
]
