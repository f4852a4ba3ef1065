"""List roles use case."""

from rolekeeper.domain.entities import Role


class ListRolesUseCase:
    """List roles, optionally filtered by a name/description search."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, query: str | None = None) -> list[Role]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        needle = (query or "").strip().casefold()
        if needle:
            roles = [
                r for r in roles
                if needle in r.name.casefold() or needle in r.description.casefold()
            ]
        return sorted(roles, key=lambda r: (not r.is_system, r.name.casefold()))
