"""Permission catalog API resources."""

import falcon.asgi

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.interfaces.api.serializers import catalog_to_dict, edge_to_dict


class CatalogResource:
    """GET /v1/catalog - permission groups with dependency edges."""

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = catalog_to_dict(self._catalog)
        resp.status = falcon.HTTP_200

    async def on_get_dependencies(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/catalog/dependencies."""
        resp.media = {"items": [edge_to_dict(e) for e in self._catalog.edges]}
        resp.status = falcon.HTTP_200
