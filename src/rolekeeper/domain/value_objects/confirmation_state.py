"""Critical-permission confirmation states."""

from enum import StrEnum


class ConfirmationState(StrEnum):
    """Draft confirmation state: idle or waiting on a critical disable."""

    IDLE = "idle"
    PENDING = "pending"
