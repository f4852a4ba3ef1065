"""Review mode middleware - read-only console."""

import falcon.asgi

from rolekeeper.domain.exceptions import ReviewModeActive

READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class ReviewModeMiddleware:
    """Rejects every mutating request while review mode is on."""

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if self._enabled and req.method not in READ_METHODS:
            raise ReviewModeActive("Review mode is active; permission changes are disabled")
