"""Unit tests for domain exceptions."""

import pytest

from rolekeeper.domain.exceptions import (
    CatalogError,
    ConcurrentModification,
    DuplicateName,
    EmptyPermissionSet,
    ImportValidationFailed,
    LastAdministrativeRole,
    NotFound,
    ReplacementRequired,
    RoleKeeperError,
    SystemRoleImmutable,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc_type",
    [
        CatalogError,
        ConcurrentModification,
        DuplicateName,
        EmptyPermissionSet,
        ImportValidationFailed,
        LastAdministrativeRole,
        NotFound,
        ReplacementRequired,
        SystemRoleImmutable,
        ValidationError,
    ],
)
def test_domain_errors_inherit_rolekeeper_error(exc_type) -> None:
    """Every engine error can be caught as RoleKeeperError."""
    assert issubclass(exc_type, RoleKeeperError)


def test_not_found_message_names_kind_and_key() -> None:
    """NotFound carries kind and key."""
    with pytest.raises(RoleKeeperError, match="Role not found: 42"):
        raise NotFound("Role", 42)


def test_duplicate_name_keeps_name() -> None:
    err = DuplicateName("Editor")
    assert err.name == "Editor"
    assert "Editor" in str(err)


def test_replacement_required_carries_user_count() -> None:
    err = ReplacementRequired("needs replacement", 3)
    assert err.user_count == 3


def test_import_validation_failed_lists_violations() -> None:
    err = ImportValidationFailed(["a", "b"])
    assert err.violations == ["a", "b"]
    assert "2 violation" in str(err)


def test_concurrent_modification_versions() -> None:
    err = ConcurrentModification("r1", expected=2, actual=3)
    assert (err.expected, err.actual) == (2, 3)
