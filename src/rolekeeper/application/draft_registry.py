"""In-process registry of open draft sessions, addressed by id."""

from uuid import UUID, uuid4

from rolekeeper.domain.draft import DraftSession
from rolekeeper.domain.exceptions import NotFound


class DraftRegistry:
    """Holds drafts for surfaces that cannot pass the session object itself."""

    def __init__(self) -> None:
        self._drafts: dict[UUID, DraftSession] = {}

    def add(self, session: DraftSession) -> UUID:
        draft_id = uuid4()
        self._drafts[draft_id] = session
        return draft_id

    def get(self, draft_id: UUID) -> DraftSession:
        try:
            return self._drafts[draft_id]
        except KeyError:
            raise NotFound("Draft", draft_id) from None

    def close(self, draft_id: UUID) -> None:
        if self._drafts.pop(draft_id, None) is None:
            raise NotFound("Draft", draft_id)

    def close_for_role(self, role_id: UUID) -> int:
        """Drop every draft of a deleted role."""
        stale = [d for d, s in self._drafts.items() if s.role_id == role_id]
        for draft_id in stale:
            del self._drafts[draft_id]
        return len(stale)

    def __len__(self) -> int:
        return len(self._drafts)
