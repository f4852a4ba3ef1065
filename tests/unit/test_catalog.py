"""Unit tests for the permission catalog and its loader."""

import json

import pytest

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import DependencyEdge, PermissionDefinition, PermissionGroup
from rolekeeper.domain.exceptions import CatalogError, NotFound
from rolekeeper.infrastructure.catalog.loader import build_catalog, load_catalog


def _group(name: str, *ids: str, critical: tuple[str, ...] = ()) -> PermissionGroup:
    return PermissionGroup(
        name=name,
        icon="shield",
        permissions=tuple(
            PermissionDefinition(id=i, label=i, group=name, critical=i in critical) for i in ids
        ),
    )


def test_prerequisites_are_transitive(catalog: PermissionCatalog) -> None:
    assert catalog.prerequisites("posts.delete") == {"posts.write", "posts.read"}
    assert catalog.prerequisites("posts.read") == frozenset()


def test_dependents_are_transitive(catalog: PermissionCatalog) -> None:
    assert catalog.dependents("posts.read") == {"posts.write", "posts.publish", "posts.delete"}
    assert catalog.dependents("posts.delete") == frozenset()


def test_cycle_is_rejected_at_load() -> None:
    """A cyclic dependency graph makes the catalog unusable."""
    with pytest.raises(CatalogError, match="cycle"):
        PermissionCatalog(
            [_group("System Control", "a", "b", "c")],
            [DependencyEdge("a", "b"), DependencyEdge("b", "c"), DependencyEdge("c", "a")],
        )


def test_long_prerequisite_chain_is_checked_without_recursion() -> None:
    ids = [f"p{i}" for i in range(2000)]
    chain = [DependencyEdge(ids[i], ids[i - 1]) for i in range(1, len(ids))]

    catalog = PermissionCatalog(
        [_group("System Control", *ids)], chain, administrative_group="System Control"
    )
    assert len(catalog.prerequisites(ids[-1])) == len(ids) - 1

    with pytest.raises(CatalogError, match="cycle"):
        PermissionCatalog([_group("System Control", *ids)], [*chain, DependencyEdge(ids[0], ids[-1])])


def test_self_dependency_is_rejected() -> None:
    with pytest.raises(CatalogError):
        PermissionCatalog([_group("System Control", "a")], [DependencyEdge("a", "a")])


def test_edge_to_unknown_permission_is_rejected() -> None:
    with pytest.raises(CatalogError, match="unknown permission 'ghost'"):
        PermissionCatalog([_group("System Control", "a")], [DependencyEdge("a", "ghost")])


def test_duplicate_permission_id_is_rejected() -> None:
    with pytest.raises(CatalogError, match="Duplicate permission id"):
        PermissionCatalog([_group("System Control", "a"), _group("Other", "a")])


def test_administrative_ids_from_flag(catalog: PermissionCatalog) -> None:
    assert catalog.administrative_ids == {"rbac.manage"}


def test_administrative_ids_fall_back_to_group() -> None:
    catalog = PermissionCatalog(
        [_group("Content", "posts.read"), _group("System Control", "settings", "rbac")],
        administrative_group="System Control",
    )
    assert catalog.administrative_ids == {"settings", "rbac"}
    assert catalog.is_administrative({"settings": True, "rbac": True})
    assert not catalog.is_administrative({"settings": True})


def test_missing_administrative_definition_is_rejected() -> None:
    with pytest.raises(CatalogError, match="administrative"):
        PermissionCatalog([_group("Content", "posts.read")], administrative_group="System Control")


def test_normalize_fills_missing_and_drops_unknown(catalog: PermissionCatalog) -> None:
    total = catalog.normalize({"posts.read": True, "nope": True})
    assert set(total) == set(catalog.ids)
    assert total["posts.read"] is True
    assert total["posts.write"] is False
    assert catalog.unknown_ids({"nope": True, "posts.read": True}) == ["nope"]


def test_violations_report_broken_edges(catalog: PermissionCatalog) -> None:
    problems = catalog.violations({"posts.write": True, "posts.read": False})
    assert problems == ["'posts.write' requires 'posts.read' (Editing requires viewing)"]


def test_unknown_lookup_raises_not_found(catalog: PermissionCatalog) -> None:
    with pytest.raises(NotFound):
        catalog.get("nope")
    with pytest.raises(NotFound):
        catalog.group("Nope")


def test_default_catalog_loads() -> None:
    catalog = load_catalog(None, "System Control")
    assert "rbac.manage" in catalog
    assert catalog.is_critical("settings.manage")
    assert catalog.administrative_ids == {"rbac.manage"}


def test_load_catalog_from_json_file(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "groups": [
                    {
                        "name": "Admin",
                        "permissions": [{"id": "root", "label": "Root", "administrative": True}],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    catalog = load_catalog(str(path))
    assert catalog.ids == ["root"]


def test_load_catalog_missing_file_is_catalog_error(tmp_path) -> None:
    with pytest.raises(CatalogError, match="Cannot read catalog file"):
        load_catalog(str(tmp_path / "missing.json"))


def test_build_catalog_rejects_malformed_document() -> None:
    with pytest.raises(CatalogError, match="Invalid catalog document"):
        build_catalog({"groups": [{"name": "X", "permissions": [{"label": "no id"}]}]})
