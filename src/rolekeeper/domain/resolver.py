"""Dependency resolver - cascade permission toggles through dependency edges.

Pure functions: inputs are never mutated and the result depends only on the
catalog and the given permission set.
"""

from collections.abc import Iterable, Mapping

from rolekeeper.domain.catalog import PermissionCatalog


def _enable(result: dict[str, bool], catalog: PermissionCatalog, permission_id: str) -> None:
    result[permission_id] = True
    for pid in catalog.prerequisites(permission_id):
        result[pid] = True


def _disable(result: dict[str, bool], catalog: PermissionCatalog, permission_id: str) -> None:
    result[permission_id] = False
    for pid in catalog.dependents(permission_id):
        result[pid] = False


def apply_toggle(
    catalog: PermissionCatalog,
    current: Mapping[str, bool],
    permission_id: str,
) -> dict[str, bool]:
    """Flip `permission_id` and return the resulting permission set.

    Enabling also enables every transitive prerequisite; disabling also
    disables every permission that transitively depends on it.
    """
    catalog.get(permission_id)
    result = catalog.normalize(current)
    if result[permission_id]:
        _disable(result, catalog, permission_id)
    else:
        _enable(result, catalog, permission_id)
    return result


def apply_group_toggle(
    catalog: PermissionCatalog,
    current: Mapping[str, bool],
    permission_ids: Iterable[str],
) -> dict[str, bool]:
    """Enable every item if any is off, otherwise disable them all."""
    items = list(permission_ids)
    for pid in items:
        catalog.get(pid)
    result = catalog.normalize(current)
    if not items:
        return result
    if all(result[pid] for pid in items):
        for pid in items:
            _disable(result, catalog, pid)
    else:
        for pid in items:
            _enable(result, catalog, pid)
    return result
