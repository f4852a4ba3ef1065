"""Permission catalog - load-once definition of every permission.

The catalog validates its dependency graph on construction and precomputes,
for each permission, the transitive set of prerequisites (everything that must
be on when it is on) and dependents (everything that must be off when it is
off). Resolver calls then cascade with a single set lookup.
"""

from collections.abc import Iterable, Mapping

from rolekeeper.domain.entities import DependencyEdge, PermissionDefinition, PermissionGroup
from rolekeeper.domain.exceptions import CatalogError, NotFound


class PermissionCatalog:
    """Immutable set of permission groups and dependency edges."""

    def __init__(
        self,
        groups: Iterable[PermissionGroup],
        edges: Iterable[DependencyEdge] = (),
        administrative_group: str | None = None,
    ) -> None:
        self._groups: tuple[PermissionGroup, ...] = tuple(groups)
        self._edges: tuple[DependencyEdge, ...] = tuple(edges)
        self._by_id: dict[str, PermissionDefinition] = {}
        self._groups_by_name: dict[str, PermissionGroup] = {}

        for group in self._groups:
            if group.name in self._groups_by_name:
                raise CatalogError(f"Duplicate permission group '{group.name}'")
            self._groups_by_name[group.name] = group
            for perm in group.permissions:
                if perm.id in self._by_id:
                    raise CatalogError(f"Duplicate permission id '{perm.id}'")
                if perm.group != group.name:
                    raise CatalogError(
                        f"Permission '{perm.id}' declares group '{perm.group}' "
                        f"but is listed under '{group.name}'"
                    )
                self._by_id[perm.id] = perm

        self._requires: dict[str, set[str]] = {pid: set() for pid in self._by_id}
        self._required_by: dict[str, set[str]] = {pid: set() for pid in self._by_id}
        for edge in self._edges:
            for pid in (edge.permission, edge.requires):
                if pid not in self._by_id:
                    raise CatalogError(f"Dependency edge references unknown permission '{pid}'")
            if edge.permission == edge.requires:
                raise CatalogError(f"Permission '{edge.permission}' cannot require itself")
            self._requires[edge.permission].add(edge.requires)
            self._required_by[edge.requires].add(edge.permission)

        self._check_acyclic()
        self._prerequisites = {pid: frozenset(self._reach(pid, self._requires)) for pid in self._by_id}
        self._dependents = {pid: frozenset(self._reach(pid, self._required_by)) for pid in self._by_id}
        self._administrative = self._resolve_administrative(administrative_group)

    def _check_acyclic(self) -> None:
        """Raise CatalogError if the requires-graph has a cycle."""
        done: set[str] = set()
        for root in self._by_id:
            if root in done:
                continue
            path = [root]
            on_path = {root}
            pending = [iter(sorted(self._requires[root]))]
            while pending:
                nxt = next(pending[-1], None)
                if nxt is None:
                    pending.pop()
                    finished = path.pop()
                    on_path.discard(finished)
                    done.add(finished)
                elif nxt in on_path:
                    cycle = path[path.index(nxt):] + [nxt]
                    raise CatalogError("Dependency cycle: " + " -> ".join(cycle))
                elif nxt not in done:
                    path.append(nxt)
                    on_path.add(nxt)
                    pending.append(iter(sorted(self._requires[nxt])))

    @staticmethod
    def _reach(start: str, adjacency: Mapping[str, set[str]]) -> set[str]:
        seen: set[str] = set()
        stack = list(adjacency[start])
        while stack:
            pid = stack.pop()
            if pid in seen:
                continue
            seen.add(pid)
            stack.extend(adjacency[pid])
        return seen

    def _resolve_administrative(self, group_name: str | None) -> frozenset[str]:
        flagged = frozenset(p.id for p in self._by_id.values() if p.administrative)
        if flagged:
            return flagged
        group = self._groups_by_name.get(group_name) if group_name else None
        if group is None or not group.permissions:
            raise CatalogError(
                "No administrative permissions: flag permissions as administrative "
                f"or provide a non-empty '{group_name}' group"
            )
        return frozenset(group.permission_ids)

    @property
    def groups(self) -> tuple[PermissionGroup, ...]:
        return self._groups

    @property
    def edges(self) -> tuple[DependencyEdge, ...]:
        return self._edges

    @property
    def ids(self) -> list[str]:
        return list(self._by_id)

    @property
    def administrative_ids(self) -> frozenset[str]:
        return self._administrative

    def __contains__(self, permission_id: object) -> bool:
        return permission_id in self._by_id

    def get(self, permission_id: str) -> PermissionDefinition:
        try:
            return self._by_id[permission_id]
        except KeyError:
            raise NotFound("Permission", permission_id) from None

    def group(self, name: str) -> PermissionGroup:
        try:
            return self._groups_by_name[name]
        except KeyError:
            raise NotFound("Permission group", name) from None

    def is_critical(self, permission_id: str) -> bool:
        return self.get(permission_id).critical

    def prerequisites(self, permission_id: str) -> frozenset[str]:
        """All permissions transitively required by `permission_id`."""
        self.get(permission_id)
        return self._prerequisites[permission_id]

    def dependents(self, permission_id: str) -> frozenset[str]:
        """All permissions that transitively require `permission_id`."""
        self.get(permission_id)
        return self._dependents[permission_id]

    def empty_set(self) -> dict[str, bool]:
        return dict.fromkeys(self._by_id, False)

    def full_set(self) -> dict[str, bool]:
        return dict.fromkeys(self._by_id, True)

    def unknown_ids(self, permissions: Mapping[str, bool]) -> list[str]:
        return sorted(pid for pid in permissions if pid not in self._by_id)

    def normalize(self, permissions: Mapping[str, bool]) -> dict[str, bool]:
        """Total map over the catalog; missing entries default to False.

        Unknown ids are dropped; callers that must reject them check
        `unknown_ids` first.
        """
        return {pid: bool(permissions.get(pid, False)) for pid in self._by_id}

    def violations(self, permissions: Mapping[str, bool]) -> list[str]:
        """Dependency edges broken by `permissions`, as readable messages."""
        problems = []
        for edge in self._edges:
            if permissions.get(edge.permission) and not permissions.get(edge.requires):
                reason = f" ({edge.message})" if edge.message else ""
                problems.append(f"'{edge.permission}' requires '{edge.requires}'{reason}")
        return problems

    def is_administrative(self, permissions: Mapping[str, bool]) -> bool:
        return all(permissions.get(pid, False) for pid in self._administrative)
