"""Domain exceptions."""


class RoleKeeperError(Exception):
    """Base exception for RoleKeeper."""

    pass


class NotFound(RoleKeeperError):
    """Requested resource was not found."""

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key


class ValidationError(RoleKeeperError):
    """Validation failed for input data."""

    pass


class DuplicateName(RoleKeeperError):
    """Another role already uses this name (case-insensitive)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"A role named '{name}' already exists")
        self.name = name


class SystemRoleImmutable(RoleKeeperError):
    """System roles cannot be modified or deleted."""

    pass


class LastAdministrativeRole(RoleKeeperError):
    """Operation would leave no role holding the administrative permissions."""

    pass


class ReplacementRequired(RoleKeeperError):
    """Role still has assigned users and needs a replacement role."""

    def __init__(self, message: str, user_count: int) -> None:
        super().__init__(message)
        self.user_count = user_count


class EmptyPermissionSet(RoleKeeperError):
    """A role must keep at least one granted permission."""

    pass


class ConcurrentModification(RoleKeeperError):
    """Stored role changed since the draft was opened."""

    def __init__(self, role_id: object, expected: int, actual: int) -> None:
        super().__init__(
            f"Role {role_id} was modified concurrently "
            f"(expected version {expected}, found {actual})"
        )
        self.expected = expected
        self.actual = actual


class CriticalConfirmationPending(RoleKeeperError):
    """A critical permission change is awaiting confirmation."""

    def __init__(self, permission_id: str) -> None:
        super().__init__(f"Confirmation pending for critical permission '{permission_id}'")
        self.permission_id = permission_id


class CatalogError(RoleKeeperError):
    """Permission catalog is inconsistent (cycle, unknown or duplicate id)."""

    pass


class ImportValidationFailed(RoleKeeperError):
    """Imported role set violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        super().__init__(f"Import rejected: {len(violations)} violation(s)")
        self.violations = violations


class ReviewModeActive(RoleKeeperError):
    """Changes are disabled while review mode is on."""

    pass
