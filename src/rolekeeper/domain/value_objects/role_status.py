"""Role status tag."""

from enum import StrEnum


class RoleStatus(StrEnum):
    """Displayed role status. Carries no access semantics."""

    ACTIVE = "active"
    DISABLED = "disabled"
