"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from rolekeeper.application.draft_registry import DraftRegistry
from rolekeeper.application.use_cases.assignment.assign_users import AssignUsersUseCase
from rolekeeper.application.use_cases.draft.commit_draft import CommitDraftUseCase
from rolekeeper.application.use_cases.draft.open_draft import OpenDraftUseCase
from rolekeeper.application.use_cases.draft.preview_commit import PreviewCommitUseCase
from rolekeeper.application.use_cases.role.create_role import CreateRoleUseCase
from rolekeeper.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolekeeper.application.use_cases.role.duplicate_role import DuplicateRoleUseCase
from rolekeeper.application.use_cases.role.list_roles import ListRolesUseCase
from rolekeeper.application.use_cases.role.update_role import UpdateRoleUseCase
from rolekeeper.application.use_cases.transfer.export_roles import ExportRolesUseCase
from rolekeeper.application.use_cases.transfer.import_roles import ImportRolesUseCase
from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.interfaces.api.errors import register_error_handlers
from rolekeeper.interfaces.api.middleware.actor import ActorMiddleware
from rolekeeper.interfaces.api.middleware.cors import CORSMiddleware
from rolekeeper.interfaces.api.middleware.review_mode import ReviewModeMiddleware
from rolekeeper.interfaces.api.resources.catalog import CatalogResource
from rolekeeper.interfaces.api.resources.drafts import DraftResource, RoleDraftsResource
from rolekeeper.interfaces.api.resources.health import HealthResource
from rolekeeper.interfaces.api.resources.logs import LogsResource
from rolekeeper.interfaces.api.resources.roles import (
    RoleDuplicateResource,
    RoleResource,
    RolesResource,
    RoleUsersResource,
)
from rolekeeper.interfaces.api.resources.transfer import ExportResource, ImportResource


def create_app(
    catalog: PermissionCatalog,
    unit_of_work_factory: type,
    *,
    review_mode: bool = False,
    cors_origins: list[str] | None = None,
    extra_middleware: list | None = None,
    drafts: DraftRegistry | None = None,
) -> App:
    """Wire use cases into resources and build the Falcon ASGI app."""
    drafts = drafts if drafts is not None else DraftRegistry()
    uow_factory = unit_of_work_factory

    list_roles = ListRolesUseCase(unit_of_work_factory=uow_factory)
    create_role = CreateRoleUseCase(unit_of_work_factory=uow_factory, catalog=catalog)
    update_role = UpdateRoleUseCase(unit_of_work_factory=uow_factory, catalog=catalog)
    duplicate_role = DuplicateRoleUseCase(unit_of_work_factory=uow_factory)
    delete_role = DeleteRoleUseCase(unit_of_work_factory=uow_factory, catalog=catalog)
    assign_users = AssignUsersUseCase(unit_of_work_factory=uow_factory)
    open_draft = OpenDraftUseCase(unit_of_work_factory=uow_factory, catalog=catalog)
    preview_commit = PreviewCommitUseCase(unit_of_work_factory=uow_factory)
    commit_draft = CommitDraftUseCase(unit_of_work_factory=uow_factory, catalog=catalog)
    export_roles = ExportRolesUseCase(unit_of_work_factory=uow_factory)
    import_roles = ImportRolesUseCase(unit_of_work_factory=uow_factory, catalog=catalog)

    health_resource = HealthResource(catalog, uow_factory)
    catalog_resource = CatalogResource(catalog)
    roles_resource = RolesResource(list_roles, create_role)
    role_resource = RoleResource(uow_factory, update_role, delete_role, drafts)
    duplicate_resource = RoleDuplicateResource(duplicate_role)
    users_resource = RoleUsersResource(uow_factory, assign_users)
    role_drafts_resource = RoleDraftsResource(open_draft, drafts)
    draft_resource = DraftResource(drafts, preview_commit, commit_draft)
    logs_resource = LogsResource(uow_factory)

    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins or []),
            *(extra_middleware or []),
            ActorMiddleware(),
            ReviewModeMiddleware(review_mode),
        ],
    )
    register_error_handlers(app)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/catalog", catalog_resource)
    app.add_route("/v1/catalog/dependencies", catalog_resource, suffix="dependencies")
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_id}", role_resource)
    app.add_route("/v1/roles/{role_id}/duplicate", duplicate_resource)
    app.add_route("/v1/roles/{role_id}/users", users_resource)
    app.add_route("/v1/roles/{role_id}/drafts", role_drafts_resource)
    app.add_route("/v1/drafts/{draft_id}", draft_resource)
    for action in ("toggle", "toggle-group", "confirm", "cancel", "discard", "preview", "commit"):
        app.add_route(f"/v1/drafts/{{draft_id}}/{action}", draft_resource, suffix=action.replace("-", "_"))
    app.add_route("/v1/logs", logs_resource)
    app.add_route("/v1/export", ExportResource(export_roles))
    app.add_route("/v1/import", ImportResource(import_roles))
    return app
