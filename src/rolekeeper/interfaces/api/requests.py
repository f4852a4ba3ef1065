"""Request parsing helpers."""

from typing import Any
from uuid import UUID

import falcon.asgi

from rolekeeper.domain.exceptions import ValidationError


def parse_uuid(value: str | None, field: str) -> UUID:
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {field}: {value}") from None


def optional_uuid(value: str | None, field: str) -> UUID | None:
    if value in (None, ""):
        return None
    return parse_uuid(value, field)


async def json_body(req: falcon.asgi.Request) -> dict[str, Any]:
    """Request body as a JSON object; empty body is {}."""
    if not req.content_length:
        return {}
    body = await req.get_media()
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def actor_of(req: falcon.asgi.Request) -> str:
    actor = getattr(req.context, "actor", None)
    return actor.actor_id if actor else "anonymous"
