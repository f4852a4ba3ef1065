"""Activity log actions."""

from enum import StrEnum


class ActivityAction(StrEnum):
    """Kinds of committed mutations recorded in the activity log."""

    PERMISSION_UPDATED = "permission_updated"
    ROLE_CREATED = "role_created"
    ROLE_UPDATED = "role_updated"
    ROLE_DUPLICATED = "role_duplicated"
    ROLE_DELETED = "role_deleted"
    USERS_ASSIGNED = "users_assigned"
