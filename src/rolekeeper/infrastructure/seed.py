"""Built-in roles seeded into an empty store."""

import logging
from uuid import UUID

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import Role
from rolekeeper.domain.value_objects import RoleColor

logger = logging.getLogger(__name__)

SUPER_ADMIN_ID = UUID("00000000-0000-4000-8000-000000000001")
EDITOR_ID = UUID("00000000-0000-4000-8000-000000000002")
VIEWER_ID = UUID("00000000-0000-4000-8000-000000000003")
AUTHOR_ID = UUID("00000000-0000-4000-8000-000000000004")

_DEFAULT_ROLES = [
    (SUPER_ADMIN_ID, "Super Admin", "Full access to every area", True, RoleColor.PRIMARY, None),
    (
        EDITOR_ID,
        "Editor",
        "Manages and publishes all content",
        True,
        RoleColor.SUCCESS,
        ["posts.read", "posts.write", "posts.publish", "posts.delete",
         "categories.manage", "tags.manage", "analytics.view", "seo.manage"],
    ),
    (
        VIEWER_ID,
        "Viewer",
        "Read-only access to content and analytics",
        True,
        RoleColor.DEFAULT,
        ["posts.read", "analytics.view"],
    ),
    (AUTHOR_ID, "Author", "Writes posts for review", False, RoleColor.INFO, ["posts.read", "posts.write"]),
]


def build_default_roles(catalog: PermissionCatalog) -> list[Role]:
    """Default roles; grants not present in `catalog` are ignored."""
    roles = []
    for role_id, name, description, is_system, color, granted in _DEFAULT_ROLES:
        if granted is None:
            permissions = catalog.full_set()
        else:
            permissions = catalog.normalize({pid: True for pid in granted if pid in catalog})
        roles.append(
            Role(
                id=role_id,
                name=name,
                description=description,
                permissions=permissions,
                is_system=is_system,
                color=color,
            )
        )
    return roles


async def seed_default_roles(unit_of_work_factory, catalog: PermissionCatalog) -> int:
    """Insert default roles when the store has none."""
    async with unit_of_work_factory() as uow:
        await uow.lock_roles()
        if await uow.roles.list_all():
            return 0
        roles = build_default_roles(catalog)
        for role in roles:
            await uow.roles.create(role)
    logger.info("Seeded %d default role(s)", len(roles))
    return len(roles)
