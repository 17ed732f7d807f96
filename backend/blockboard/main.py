"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from urllib.parse import urlparse

import asyncpg
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blockboard.config import Settings, get_settings
from blockboard.infrastructure.container import AppContainer
from blockboard.infrastructure.logging.log_config import setup_logging
from blockboard.presentation.api.errors import register_exception_handlers
from blockboard.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists(settings: Settings) -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    Other database backends are left alone.
    """
    parsed = urlparse(settings.database_url)
    if not parsed.scheme.startswith("postgresql"):
        return
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    maintenance_url = parsed._replace(scheme="postgresql", path="/postgres").geturl()

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except (OSError, asyncpg.PostgresError) as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: create tables and bucket, close clients on exit."""
    container: AppContainer = app.state.container
    setup_logging(container.settings)

    await _ensure_database_exists(container.settings)
    await container.startup()

    yield

    await container.shutdown()
    logger.info("Shutdown complete")


def create_app(
    settings: Settings | None = None, container: AppContainer | None = None
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The container is attached at construction time, so the app also serves
    requests when driven without a lifespan (e.g. ``httpx.ASGITransport``).
    """
    if container is None:
        container = AppContainer.from_settings(settings or get_settings())
    settings = container.settings

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.container = container

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "blockboard.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.app_env == "development",
    )
