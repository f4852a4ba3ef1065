"""Catalog loading - JSON file or built-in default."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaError

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import DependencyEdge, PermissionDefinition, PermissionGroup
from rolekeeper.domain.exceptions import CatalogError
from rolekeeper.infrastructure.catalog.default_catalog import DEFAULT_CATALOG

logger = logging.getLogger(__name__)

DEFAULT_ADMINISTRATIVE_GROUP = "System Control"


class PermissionSpec(BaseModel):
    id: str = Field(min_length=1)
    label: str
    description: str = ""
    critical: bool = False
    administrative: bool = False


class GroupSpec(BaseModel):
    name: str = Field(min_length=1)
    icon: str = "shield"
    permissions: list[PermissionSpec]


class EdgeSpec(BaseModel):
    permission: str
    requires: str
    message: str = ""


class CatalogDocument(BaseModel):
    """On-disk catalog format."""

    groups: list[GroupSpec]
    dependencies: list[EdgeSpec] = Field(default_factory=list)


def build_catalog(
    data: dict[str, Any],
    administrative_group: str | None = DEFAULT_ADMINISTRATIVE_GROUP,
) -> PermissionCatalog:
    """Validate a catalog document and build the catalog. Raises CatalogError."""
    try:
        document = CatalogDocument.model_validate(data)
    except SchemaError as e:
        raise CatalogError(f"Invalid catalog document: {e}") from e

    groups = [
        PermissionGroup(
            name=g.name,
            icon=g.icon,
            permissions=tuple(
                PermissionDefinition(
                    id=p.id,
                    label=p.label,
                    group=g.name,
                    description=p.description,
                    critical=p.critical,
                    administrative=p.administrative,
                )
                for p in g.permissions
            ),
        )
        for g in document.groups
    ]
    edges = [DependencyEdge(e.permission, e.requires, e.message) for e in document.dependencies]
    catalog = PermissionCatalog(groups, edges, administrative_group=administrative_group)
    logger.info(
        "Permission catalog loaded: %d group(s), %d permission(s), %d dependency edge(s)",
        len(catalog.groups), len(catalog.ids), len(catalog.edges),
    )
    return catalog


def load_catalog(
    path: str | None = None,
    administrative_group: str | None = DEFAULT_ADMINISTRATIVE_GROUP,
) -> PermissionCatalog:
    """Load from `path` (JSON) or fall back to the built-in catalog."""
    if not path:
        return build_catalog(DEFAULT_CATALOG, administrative_group)
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e
    return build_catalog(data, administrative_group)
