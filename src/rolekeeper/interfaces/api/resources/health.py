"""Health check endpoints."""

import falcon.asgi

from rolekeeper import __version__
from rolekeeper.domain.catalog import PermissionCatalog


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, catalog: PermissionCatalog, unit_of_work_factory: type) -> None:
        self._catalog = catalog
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok", "version": __version__}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (catalog loaded, store reachable)."""
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        resp.media = {
            "status": "ready",
            "permissions": len(self._catalog.ids),
            "roles": len(roles),
        }
        resp.status = falcon.HTTP_200
