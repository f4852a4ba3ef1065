"""Preview commit use case."""

from rolekeeper.application.dto.role_dto import CommitPreview
from rolekeeper.domain.draft import DraftSession


class PreviewCommitUseCase:
    """Diff of a draft plus the number of users the change will affect."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, session: DraftSession) -> CommitPreview:
        changes = session.diff()
        affected = 0
        if changes:
            async with self._uow_factory() as uow:
                affected = await uow.assignments.count_by_role(session.role_id)
        return CommitPreview(
            role_id=session.role_id,
            role_name=session.role_name,
            changes=changes,
            affected_users=affected,
        )
