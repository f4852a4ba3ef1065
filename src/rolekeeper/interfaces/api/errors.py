"""Map domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from rolekeeper.domain.exceptions import (
    CatalogError,
    ConcurrentModification,
    CriticalConfirmationPending,
    DuplicateName,
    EmptyPermissionSet,
    ImportValidationFailed,
    LastAdministrativeRole,
    NotFound,
    ReplacementRequired,
    ReviewModeActive,
    RoleKeeperError,
    SystemRoleImmutable,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[RoleKeeperError], tuple[str, str]] = {
    NotFound: (falcon.HTTP_404, "not_found"),
    ValidationError: (falcon.HTTP_400, "validation_error"),
    DuplicateName: (falcon.HTTP_409, "duplicate_name"),
    SystemRoleImmutable: (falcon.HTTP_403, "system_role_immutable"),
    LastAdministrativeRole: (falcon.HTTP_409, "last_administrative_role"),
    ReplacementRequired: (falcon.HTTP_409, "replacement_required"),
    EmptyPermissionSet: (falcon.HTTP_422, "empty_permission_set"),
    ConcurrentModification: (falcon.HTTP_409, "concurrent_modification"),
    CriticalConfirmationPending: (falcon.HTTP_409, "confirmation_pending"),
    ImportValidationFailed: (falcon.HTTP_422, "import_validation_failed"),
    ReviewModeActive: (falcon.HTTP_423, "review_mode_active"),
    CatalogError: (falcon.HTTP_500, "catalog_error"),
}


def error_body(ex: RoleKeeperError) -> tuple[str, dict]:
    """Status and JSON body for a domain error."""
    status, code = falcon.HTTP_400, "error"
    for cls in type(ex).__mro__:
        if cls in ERROR_STATUS:
            status, code = ERROR_STATUS[cls]
            break
    body: dict = {"error": code, "message": str(ex)}
    if isinstance(ex, ReplacementRequired):
        body["user_count"] = ex.user_count
    elif isinstance(ex, ImportValidationFailed):
        body["violations"] = ex.violations
    elif isinstance(ex, ConcurrentModification):
        body["expected_version"] = ex.expected
        body["current_version"] = ex.actual
    elif isinstance(ex, CriticalConfirmationPending):
        body["pending_confirmation"] = ex.permission_id
    return status, body


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: RoleKeeperError, params: dict
) -> None:
    resp.status, resp.media = error_body(ex)


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "internal_error", "message": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install handlers; Falcon picks the most specific one for each exception."""
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(RoleKeeperError, handle_domain_error)
