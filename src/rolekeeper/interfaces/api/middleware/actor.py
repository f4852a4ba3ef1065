"""Actor middleware - records who is performing the request."""

from dataclasses import dataclass

import falcon.asgi

ACTOR_HEADER = "X-Actor"


@dataclass
class RequestActor:
    """Operator from request context, as named by the calling surface."""

    actor_id: str


class ActorMiddleware:
    """Middleware that sets req.context.actor from the X-Actor header.

    The header is trusted as given; identity is verified upstream.
    """

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract actor from header."""
        name = (req.get_header(ACTOR_HEADER) or "").strip()
        req.context.actor = RequestActor(actor_id=name or "anonymous")
