"""Open draft use case."""

from uuid import UUID

from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.draft import DraftSession
from rolekeeper.domain.exceptions import NotFound


class OpenDraftUseCase:
    """Start a draft session on the committed permissions of a role."""

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(self, role_id: UUID) -> DraftSession:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
        return DraftSession(self._catalog, role)
