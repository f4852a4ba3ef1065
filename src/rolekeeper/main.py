"""Application entry point and composition root."""

import logging

from rolekeeper import __version__
from rolekeeper.config import Settings, get_settings
from rolekeeper.infrastructure.catalog.loader import load_catalog
from rolekeeper.infrastructure.persistence.memory.store import InMemoryStore
from rolekeeper.infrastructure.persistence.memory.unit_of_work import (
    create_uow_factory as create_memory_uow_factory,
)
from rolekeeper.infrastructure.seed import build_default_roles, seed_default_roles
from rolekeeper.interfaces.api.app import create_app

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_rolekeeper_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies.

    An inconsistent permission catalog raises CatalogError here, so the
    process refuses to start.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    catalog = load_catalog(settings.catalog_path, settings.administrative_group)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

    if settings.storage_backend == "postgres":
        from rolekeeper.infrastructure.persistence.postgres.connection import create_pool
        from rolekeeper.infrastructure.persistence.postgres.unit_of_work import (
            create_uow_factory as create_postgres_uow_factory,
        )
        from rolekeeper.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware

        pool = create_pool(settings.database_url)
        uow_factory = create_postgres_uow_factory(pool)

        async def on_startup() -> None:
            if settings.seed_default_roles:
                await seed_default_roles(uow_factory, catalog)

        lifespan = [PoolLifespanMiddleware(pool, on_startup=on_startup)]
    else:
        roles = build_default_roles(catalog) if settings.seed_default_roles else []
        uow_factory = create_memory_uow_factory(InMemoryStore.with_roles(roles))
        lifespan = []

    logger.info(
        "RoleKeeper v%s starting (%s backend, review mode %s)",
        __version__, settings.storage_backend, "on" if settings.review_mode else "off",
    )
    return create_app(
        catalog,
        uow_factory,
        review_mode=settings.review_mode,
        cors_origins=cors_origins,
        extra_middleware=lifespan,
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_rolekeeper_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
