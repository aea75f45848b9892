"""ASGI entry point: `uvicorn src.main:app`.

Startup builds the logger, engine and event bus up front so the first
request does not pay for them. Shutdown lets queued notifications for
already committed writes finish before the pool is closed.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import get_settings
from src.core.container import get_database, get_event_bus, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    logger = get_logger()
    database = get_database()
    event_bus = get_event_bus()

    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )
    try:
        yield
    finally:
        await event_bus.drain()
        await database.close()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Freelance marketplace: projects, applications and assignment",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(TraceMiddleware)
    register_exception_handlers(app)

    for router in (system_router, v1_router):
        app.include_router(router)
    return app


app = create_app()
