"""Import roles use case."""

import logging
from dataclasses import replace

from pydantic import ValidationError as SchemaError

from rolekeeper.application.activity import record_activity, stamp
from rolekeeper.application.dto.role_transfer import EXPORT_SCHEMA_VERSION, RoleExportDocument
from rolekeeper.domain.catalog import PermissionCatalog
from rolekeeper.domain.entities import Role
from rolekeeper.domain.exceptions import ImportValidationFailed
from rolekeeper.domain.policies import MAX_NAME_LENGTH, role_set_violations
from rolekeeper.domain.value_objects import ActivityAction

logger = logging.getLogger(__name__)


def _same_content(a: Role, b: Role) -> bool:
    return (a.name, a.description, a.permissions, a.color, a.status) == (
        b.name, b.description, b.permissions, b.color, b.status
    )


class ImportRolesUseCase:
    """Upsert roles from an export document, all or nothing.

    Roles are matched by id. New roles are always created as custom roles.
    System roles may appear in the document only unchanged. The resulting
    role set is validated as a whole before anything is written.
    """

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    def _parse(self, payload: str | bytes) -> RoleExportDocument:
        try:
            document = RoleExportDocument.model_validate_json(payload)
        except SchemaError as e:
            raise ImportValidationFailed(
                [f"{'.'.join(str(p) for p in err['loc']) or 'document'}: {err['msg']}" for err in e.errors()]
            ) from e
        if document.schema_version != EXPORT_SCHEMA_VERSION:
            raise ImportValidationFailed(
                [f"Unsupported schema version {document.schema_version}, expected {EXPORT_SCHEMA_VERSION}"]
            )
        return document

    async def execute(self, actor: str, payload: str | bytes) -> int:
        """Apply the import and return the number of roles created or updated."""
        document = self._parse(payload)
        violations: list[str] = []

        async with self._uow_factory() as uow:
            await uow.lock_roles()
            current = {r.id: r for r in await uow.roles.list_all()}
            result = dict(current)
            created: list[Role] = []
            updated: list[Role] = []
            seen_ids = set()

            for record in document.roles:
                if record.id in seen_ids:
                    violations.append(f"Role id {record.id} appears more than once")
                    continue
                seen_ids.add(record.id)
                name = record.name.strip()
                if len(name) > MAX_NAME_LENGTH:
                    violations.append(f"Role '{name[:20]}...' name exceeds {MAX_NAME_LENGTH} characters")
                unknown = self._catalog.unknown_ids(record.permissions)
                if unknown:
                    violations.append(f"Role '{name}' references unknown permission(s): {', '.join(unknown)}")
                permissions = self._catalog.normalize(record.permissions)

                existing = current.get(record.id)
                if existing is None:
                    role = Role(
                        id=record.id,
                        name=name,
                        description=record.description.strip(),
                        permissions=permissions,
                        is_system=False,
                        last_modified=stamp(actor),
                        color=record.color,
                        status=record.status,
                    )
                    created.append(role)
                else:
                    role = replace(
                        existing,
                        name=name,
                        description=record.description.strip(),
                        permissions=permissions,
                        color=record.color if "color" in record.model_fields_set else existing.color,
                        status=record.status if "status" in record.model_fields_set else existing.status,
                    )
                    if _same_content(role, existing):
                        continue
                    if existing.is_system:
                        violations.append(f"System role '{existing.name}' cannot be modified by import")
                        continue
                    role = replace(role, version=existing.version + 1, last_modified=stamp(actor))
                    updated.append(role)
                result[role.id] = role

            violations.extend(role_set_violations(self._catalog, result.values()))
            if violations:
                logger.warning("Import by %s rejected with %d violation(s)", actor, len(violations))
                raise ImportValidationFailed(violations)

            for role in created:
                await uow.roles.create(role)
                await record_activity(
                    uow, ActivityAction.ROLE_CREATED, role.id, actor, f"Imported role '{role.name}'"
                )
            for role in updated:
                await uow.roles.update(role)
                await record_activity(
                    uow, ActivityAction.ROLE_UPDATED, role.id, actor, f"Role '{role.name}' updated by import"
                )

        count = len(created) + len(updated)
        logger.info("Import by %s applied: %d created, %d updated", actor, len(created), len(updated))
        return count
