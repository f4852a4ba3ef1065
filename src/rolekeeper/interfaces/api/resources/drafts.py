"""Draft session API resources."""

import falcon.asgi

from rolekeeper.application.draft_registry import DraftRegistry
from rolekeeper.application.use_cases.draft.commit_draft import CommitDraftUseCase
from rolekeeper.application.use_cases.draft.open_draft import OpenDraftUseCase
from rolekeeper.application.use_cases.draft.preview_commit import PreviewCommitUseCase
from rolekeeper.domain.exceptions import ValidationError
from rolekeeper.interfaces.api.requests import actor_of, json_body, parse_uuid
from rolekeeper.interfaces.api.serializers import draft_to_dict, preview_to_dict, role_to_dict


def _required_str(body: dict, field: str) -> str:
    value = body.get(field)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Missing required field: {field}")
    return value


class RoleDraftsResource:
    """POST /v1/roles/{role_id}/drafts - open a draft on the role."""

    def __init__(self, open_draft: OpenDraftUseCase, drafts: DraftRegistry) -> None:
        self._open = open_draft
        self._drafts = drafts

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        session = await self._open.execute(parse_uuid(role_id, "role id"))
        draft_id = self._drafts.add(session)
        resp.media = draft_to_dict(draft_id, session)
        resp.status = falcon.HTTP_201


class DraftResource:
    """Draft state and editing operations under /v1/drafts/{draft_id}."""

    def __init__(
        self,
        drafts: DraftRegistry,
        preview_commit: PreviewCommitUseCase,
        commit_draft: CommitDraftUseCase,
    ) -> None:
        self._drafts = drafts
        self._preview = preview_commit
        self._commit = commit_draft

    def _session(self, draft_id: str):
        did = parse_uuid(draft_id, "draft id")
        return did, self._drafts.get(did)

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        did, session = self._session(draft_id)
        resp.media = draft_to_dict(did, session)

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        self._drafts.close(parse_uuid(draft_id, "draft id"))
        resp.status = falcon.HTTP_204

    async def on_post_toggle(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        """POST .../toggle {"permission": id} - may answer with a pending confirmation."""
        did, session = self._session(draft_id)
        session.toggle(_required_str(await json_body(req), "permission"))
        resp.media = draft_to_dict(did, session)

    async def on_post_toggle_group(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        did, session = self._session(draft_id)
        session.toggle_group(_required_str(await json_body(req), "group"))
        resp.media = draft_to_dict(did, session)

    async def on_post_confirm(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        did, session = self._session(draft_id)
        body = await json_body(req)
        session.confirm_critical(body.get("permission"))
        resp.media = draft_to_dict(did, session)

    async def on_post_cancel(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        did, session = self._session(draft_id)
        session.cancel_critical()
        resp.media = draft_to_dict(did, session)

    async def on_post_discard(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        did, session = self._session(draft_id)
        session.discard()
        resp.media = draft_to_dict(did, session)

    async def on_get_preview(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        _, session = self._session(draft_id)
        resp.media = preview_to_dict(await self._preview.execute(session))

    async def on_post_commit(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, draft_id: str) -> None:
        """POST .../commit {"expected_version"?: int}."""
        did, session = self._session(draft_id)
        body = await json_body(req)
        expected = body.get("expected_version")
        if expected is not None and (not isinstance(expected, int) or isinstance(expected, bool)):
            raise ValidationError("expected_version must be an integer")
        role = await self._commit.execute(session, actor_of(req), expected)
        resp.media = {"role": role_to_dict(role), "draft": draft_to_dict(did, session)}
