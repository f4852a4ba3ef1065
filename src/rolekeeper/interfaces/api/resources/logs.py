"""Activity log API resource."""

import falcon.asgi

from rolekeeper.interfaces.api.requests import optional_uuid
from rolekeeper.interfaces.api.serializers import log_to_dict


class LogsResource:
    """GET /v1/logs?role_id=&limit= - activity log, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        role_id = optional_uuid(req.get_param("role_id"), "role_id")
        limit = req.get_param_as_int("limit", min_value=1, max_value=1000, default=100)
        async with self._uow_factory() as uow:
            entries = await uow.activity_log.list(role_id=role_id, limit=limit)
        resp.media = {"items": [log_to_dict(e) for e in entries]}
        resp.status = falcon.HTTP_200
