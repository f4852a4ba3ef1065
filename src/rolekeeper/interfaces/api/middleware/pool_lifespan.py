"""Pool lifespan middleware - opens pool on startup, closes on shutdown."""

from collections.abc import Awaitable, Callable
from typing import Any

from psycopg_pool import AsyncConnectionPool


class PoolLifespanMiddleware:
    """Middleware that opens the connection pool on startup and closes on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        on_startup: Callable[[], Awaitable[Any]] | None = None,
    ) -> None:
        self._pool = pool
        self._on_startup = on_startup

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts, then run the startup hook."""
        await self._pool.open()
        if self._on_startup:
            await self._on_startup()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
