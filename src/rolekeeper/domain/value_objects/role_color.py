"""Role color tag."""

from enum import StrEnum


class RoleColor(StrEnum):
    """Presentation color of a role badge. Opaque to the engine."""

    PRIMARY = "primary"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    DEFAULT = "default"
    INFO = "info"
