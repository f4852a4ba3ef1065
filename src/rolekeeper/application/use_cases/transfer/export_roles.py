"""Export roles use case."""

from datetime import UTC, datetime

from rolekeeper.application.dto.role_transfer import RoleExportDocument, RoleRecord


class ExportRolesUseCase:
    """Serialize every role to a JSON export document."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> str:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        document = RoleExportDocument(
            exported_at=datetime.now(UTC),
            roles=[
                RoleRecord(
                    id=r.id,
                    name=r.name,
                    description=r.description,
                    is_system=r.is_system,
                    color=r.color,
                    status=r.status,
                    permissions=dict(r.permissions),
                )
                for r in sorted(roles, key=lambda r: r.name.casefold())
            ],
        )
        return document.model_dump_json(indent=2)
