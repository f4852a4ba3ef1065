"""Role export/import API resources."""

import falcon.asgi

from rolekeeper.application.use_cases.transfer.export_roles import ExportRolesUseCase
from rolekeeper.application.use_cases.transfer.import_roles import ImportRolesUseCase
from rolekeeper.interfaces.api.requests import actor_of


class ExportResource:
    """GET /v1/export - download roles as JSON."""

    def __init__(self, export_roles: ExportRolesUseCase) -> None:
        self._export = export_roles

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.text = await self._export.execute()
        resp.content_type = falcon.MEDIA_JSON
        resp.set_header("Content-Disposition", 'attachment; filename="roles.json"')
        resp.status = falcon.HTTP_200


class ImportResource:
    """POST /v1/import - raw export document in the body; all or nothing."""

    def __init__(self, import_roles: ImportRolesUseCase) -> None:
        self._import = import_roles

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        payload = await req.stream.read()
        count = await self._import.execute(actor_of(req), payload)
        resp.media = {"imported": count}
        resp.status = falcon.HTTP_200
