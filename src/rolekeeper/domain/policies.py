"""Role lifecycle invariants: unique names, sound permission sets, administrative floor."""

from collections.abc import Iterable, Mapping
from uuid import UUID

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import Role
from rolekeeper.domain.exceptions import DuplicateName, LastAdministrativeRole, ValidationError

MAX_NAME_LENGTH = 100


def clean_name(name: str) -> str:
    """Strip and check a role name."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Role name is required")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationError(f"Role name must be at most {MAX_NAME_LENGTH} characters")
    return cleaned


def name_key(name: str) -> str:
    return name.strip().casefold()


def ensure_unique_name(roles: Iterable[Role], name: str, exclude_id: UUID | None = None) -> None:
    key = name_key(name)
    for role in roles:
        if role.id != exclude_id and name_key(role.name) == key:
            raise DuplicateName(name)


def checked_permissions(catalog: PermissionCatalog, permissions: Mapping[str, bool]) -> dict[str, bool]:
    """Total, dependency-sound copy of `permissions`, or ValidationError."""
    unknown = catalog.unknown_ids(permissions)
    if unknown:
        raise ValidationError("Unknown permission(s): " + ", ".join(unknown))
    total = catalog.normalize(permissions)
    problems = catalog.violations(total)
    if problems:
        raise ValidationError("Dependency violation: " + "; ".join(problems))
    return total


def ensure_administrative_floor(catalog: PermissionCatalog, roles: Iterable[Role], action: str) -> None:
    """Raise LastAdministrativeRole if `roles` (the state after `action`) has no admin."""
    if not any(catalog.is_administrative(r.permissions) for r in roles):
        raise LastAdministrativeRole(
            f"Cannot {action}: it is the last role holding administrative permissions"
        )


def role_set_violations(catalog: PermissionCatalog, roles: Iterable[Role]) -> list[str]:
    """Every invariant broken by a complete role set (used to vet imports)."""
    violations: list[str] = []
    seen: dict[str, str] = {}
    role_list = list(roles)
    for role in role_list:
        label = f"Role '{role.name}'"
        if not role.name.strip():
            violations.append(f"Role {role.id} has an empty name")
        key = name_key(role.name)
        if key in seen:
            violations.append(f"{label} duplicates the name of role '{seen[key]}'")
        else:
            seen[key] = role.name
        unknown = catalog.unknown_ids(role.permissions)
        if unknown:
            violations.append(f"{label} references unknown permission(s): {', '.join(unknown)}")
        for problem in catalog.violations(role.permissions):
            violations.append(f"{label}: {problem}")
    if not any(catalog.is_administrative(r.permissions) for r in role_list):
        violations.append("No role holds the administrative permissions")
    return violations
