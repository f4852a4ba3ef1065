"""Unit tests for the in-memory unit of work and seed data."""

import pytest

from rolekeeper.domain.exceptions import ValidationError
from rolekeeper.domain.value_objects import RoleColor
from rolekeeper.infrastructure.catalog.loader import load_catalog
from rolekeeper.infrastructure.persistence.memory.store import InMemoryStore
from rolekeeper.infrastructure.persistence.memory.unit_of_work import create_uow_factory
from rolekeeper.infrastructure.seed import (
    SUPER_ADMIN_ID,
    build_default_roles,
    seed_default_roles,
)

from tests.conftest import VIEWER_ID


@pytest.mark.asyncio
async def test_rollback_restores_store(uow_factory, store) -> None:
    with pytest.raises(ValidationError):
        async with uow_factory() as uow:
            await uow.lock_roles()
            role = await uow.roles.get_by_id(VIEWER_ID)
            role.name = "Changed"
            await uow.roles.update(role)
            raise ValidationError("abort")

    assert store.roles[VIEWER_ID].name == "Viewer"


@pytest.mark.asyncio
async def test_readers_do_not_snapshot_the_store(uow_factory, store, monkeypatch) -> None:
    calls = []
    original = store.snapshot
    monkeypatch.setattr(store, "snapshot", lambda: calls.append(1) or original())

    async with uow_factory() as uow:
        await uow.roles.list_all()
        await uow.activity_log.list()
    assert calls == []

    async with uow_factory() as uow:
        await uow.lock_roles()
        await uow.lock_roles()
    assert calls == [1]


@pytest.mark.asyncio
async def test_repository_returns_copies(uow_factory, store) -> None:
    async with uow_factory() as uow:
        role = await uow.roles.get_by_id(VIEWER_ID)
        role.name = "Not saved"

    assert store.roles[VIEWER_ID].name == "Viewer"


@pytest.mark.asyncio
async def test_seed_only_fills_empty_store() -> None:
    catalog = load_catalog()
    store = InMemoryStore()
    factory = create_uow_factory(store)

    await seed_default_roles(factory, catalog)
    await seed_default_roles(factory, catalog)

    assert len(store.roles) == len(build_default_roles(catalog))
    admin = store.roles[SUPER_ADMIN_ID]
    assert admin.is_system
    assert admin.color == RoleColor.PRIMARY
    assert catalog.is_administrative(admin.permissions)


def test_default_roles_are_dependency_sound() -> None:
    catalog = load_catalog()
    for role in build_default_roles(catalog):
        assert catalog.violations(role.permissions) == []
        assert set(role.permissions) == set(catalog.ids)
