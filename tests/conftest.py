"""Pytest fixtures for RoleKeeper tests."""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import Role
from rolekeeper.infrastructure.catalog.loader import build_catalog
from rolekeeper.infrastructure.persistence.memory.store import InMemoryStore
from rolekeeper.infrastructure.persistence.memory.unit_of_work import create_uow_factory

# --- Catalog ---

CATALOG_DATA = {
    "groups": [
        {
            "name": "Posts",
            "icon": "file-text",
            "permissions": [
                {"id": "posts.read", "label": "View Posts"},
                {"id": "posts.write", "label": "Edit Posts"},
                {"id": "posts.publish", "label": "Publish Posts"},
                {"id": "posts.delete", "label": "Delete Posts"},
            ],
        },
        {
            "name": "Users",
            "icon": "users",
            "permissions": [
                {"id": "users.read", "label": "View Users"},
            ],
        },
        {
            "name": "System Control",
            "icon": "shield",
            "permissions": [
                {"id": "settings.manage", "label": "Manage Settings", "critical": True},
                {"id": "rbac.manage", "label": "Manage Roles", "critical": True, "administrative": True},
            ],
        },
    ],
    "dependencies": [
        {"permission": "posts.write", "requires": "posts.read", "message": "Editing requires viewing"},
        {"permission": "posts.publish", "requires": "posts.write"},
        {"permission": "posts.delete", "requires": "posts.write"},
        {"permission": "rbac.manage", "requires": "users.read"},
    ],
}

ADMIN_ID = UUID("10000000-0000-4000-8000-000000000001")
EDITOR_ID = UUID("10000000-0000-4000-8000-000000000002")
VIEWER_ID = UUID("10000000-0000-4000-8000-000000000003")


def make_role(
    catalog: PermissionCatalog,
    name: str,
    granted: list[str],
    *,
    role_id: UUID | None = None,
    is_system: bool = False,
    description: str = "",
) -> Role:
    """Role with exactly `granted` switched on."""
    return Role(
        id=role_id or uuid4(),
        name=name,
        description=description or name,
        permissions=catalog.normalize({pid: True for pid in granted}),
        is_system=is_system,
    )


def standard_roles(catalog: PermissionCatalog) -> list[Role]:
    """System Admin (all), custom Editor (posts, no admin) and custom Viewer."""
    return [
        make_role(catalog, "Admin", catalog.ids, role_id=ADMIN_ID, is_system=True),
        make_role(
            catalog,
            "Editor",
            ["posts.read", "posts.write", "posts.publish", "posts.delete"],
            role_id=EDITOR_ID,
        ),
        make_role(catalog, "Viewer", ["posts.read"], role_id=VIEWER_ID),
    ]


# --- Fixtures ---


@pytest.fixture
def catalog() -> PermissionCatalog:
    """Small catalog: posts.delete -> posts.write -> posts.read, admin = rbac.manage."""
    return build_catalog(CATALOG_DATA)


@pytest.fixture
def store(catalog: PermissionCatalog) -> InMemoryStore:
    """In-memory store seeded with the standard roles."""
    return InMemoryStore.with_roles(standard_roles(catalog))


@pytest.fixture
def uow_factory(store: InMemoryStore):
    """Factory returning async context manager over the seeded store."""
    return create_uow_factory(store)
