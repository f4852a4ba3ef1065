"""Export/import document schema."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from rolekeeper.domain.value_objects import RoleColor, RoleStatus

EXPORT_SCHEMA_VERSION = 1


class RoleRecord(BaseModel):
    """One role in an export document."""

    id: UUID
    name: str
    description: str = ""
    is_system: bool = False
    color: RoleColor = RoleColor.DEFAULT
    status: RoleStatus = RoleStatus.ACTIVE
    permissions: dict[str, bool] = Field(default_factory=dict)


class RoleExportDocument(BaseModel):
    """Serialized role list."""

    schema_version: int = EXPORT_SCHEMA_VERSION
    exported_at: datetime | None = None
    roles: list[RoleRecord]
