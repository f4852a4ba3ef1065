"""Roles API resources."""

import falcon.asgi

from rolekeeper.application.draft_registry import DraftRegistry
from rolekeeper.application.dto.role_dto import RoleInput
from rolekeeper.application.use_cases.assignment.assign_users import AssignUsersUseCase
from rolekeeper.application.use_cases.role.create_role import CreateRoleUseCase
from rolekeeper.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolekeeper.application.use_cases.role.duplicate_role import DuplicateRoleUseCase
from rolekeeper.application.use_cases.role.list_roles import ListRolesUseCase
from rolekeeper.application.use_cases.role.update_role import UpdateRoleUseCase
from rolekeeper.domain.exceptions import NotFound, ValidationError
from rolekeeper.domain.value_objects import RoleColor, RoleStatus
from rolekeeper.interfaces.api.requests import actor_of, json_body, optional_uuid, parse_uuid
from rolekeeper.interfaces.api.serializers import assignment_to_dict, role_to_dict


def _tag(body: dict, field: str, kind: type) -> object:
    value = body.get(field)
    if value is None:
        return None
    try:
        return kind(value)
    except ValueError:
        allowed = ", ".join(m.value for m in kind)
        raise ValidationError(f"{field} must be one of: {allowed}") from None


def _role_input(body: dict) -> RoleInput:
    name = body.get("name")
    if not isinstance(name, str):
        raise ValidationError("Missing required field: name")
    permissions = body.get("permissions")
    if permissions is not None and (
        not isinstance(permissions, dict)
        or not all(isinstance(v, bool) for v in permissions.values())
    ):
        raise ValidationError("permissions must map permission ids to booleans")
    return RoleInput(
        name=name,
        description=str(body.get("description") or ""),
        permissions=permissions,
        clone_from_role_id=optional_uuid(body.get("clone_from_role_id"), "clone_from_role_id"),
        color=_tag(body, "color", RoleColor),
        status=_tag(body, "status", RoleStatus),
    )


class RolesResource:
    """GET/POST /v1/roles - list (optional ?q= search) and create roles."""

    def __init__(self, list_roles: ListRolesUseCase, create_role: CreateRoleUseCase) -> None:
        self._list = list_roles
        self._create = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        roles = await self._list.execute(req.get_param("q"))
        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        data = _role_input(await json_body(req))
        role = await self._create.execute(actor_of(req), data)
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{role_id}."""

    def __init__(
        self,
        unit_of_work_factory: type,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
        drafts: DraftRegistry,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._update = update_role
        self._delete = delete_role
        self._drafts = drafts

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        rid = parse_uuid(role_id, "role id")
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(rid)
        if not role:
            raise NotFound("Role", rid)
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        data = _role_input(await json_body(req))
        role = await self._update.execute(actor_of(req), parse_uuid(role_id, "role id"), data)
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        """Delete role; users move to ?replacement_role_id= when the role has any."""
        rid = parse_uuid(role_id, "role id")
        replacement = optional_uuid(req.get_param("replacement_role_id"), "replacement_role_id")
        await self._delete.execute(actor_of(req), rid, replacement)
        self._drafts.close_for_role(rid)
        resp.status = falcon.HTTP_204


class RoleDuplicateResource:
    """POST /v1/roles/{role_id}/duplicate."""

    def __init__(self, duplicate_role: DuplicateRoleUseCase) -> None:
        self._duplicate = duplicate_role

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        role = await self._duplicate.execute(actor_of(req), parse_uuid(role_id, "role id"))
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleUsersResource:
    """GET/POST /v1/roles/{role_id}/users - list and bulk-assign users."""

    def __init__(self, unit_of_work_factory: type, assign_users: AssignUsersUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._assign = assign_users

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        rid = parse_uuid(role_id, "role id")
        async with self._uow_factory() as uow:
            if not await uow.roles.get_by_id(rid):
                raise NotFound("Role", rid)
            records = await uow.assignments.list_by_role(rid)
        resp.media = {"items": [assignment_to_dict(a) for a in records]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        body = await json_body(req)
        user_ids = body.get("user_ids")
        if not isinstance(user_ids, list) or not all(isinstance(u, str) for u in user_ids):
            raise ValidationError("user_ids must be a list of strings")
        added = await self._assign.execute(actor_of(req), parse_uuid(role_id, "role id"), user_ids)
        resp.media = {"assigned": added}
        resp.status = falcon.HTTP_200
