"""
FastAPI application for the reorder service.

``app`` is what uvicorn serves (see ``manage.py serve``).
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from src.api.middleware.error_handler import setup_exception_handlers
from src.api.routes import health_router, reorder_router, reports_router
from src.api.routes.health import API_VERSION
from src.config import Settings, configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Migrate and open the pool before serving; close the pool on the way out."""
    from src.infrastructure.storage.sqlite import close_pool, get_pool
    from src.infrastructure.storage.sqlite.migrations import run_migrations

    settings = get_settings()
    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        db_path=str(settings.storage.db_path),
    )

    try:
        results = await run_migrations()
        failed = [r.version for r in results if not r.success]
        if failed:
            raise RuntimeError(f"Migrations failed: {', '.join(failed)}")
        await get_pool()
    except Exception as e:
        logger.error("database_init_failed", error=str(e))
        raise

    logger.info("application_started", migrations_applied=len(results))
    yield

    try:
        await close_pool()
    except Exception as e:
        logger.warning("connection_pool_close_failed", error=str(e))
    logger.info("application_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with middleware, error handlers and routers."""
    settings = settings or get_settings()
    configure_logging()

    app = FastAPI(
        title="Restock Reorder API",
        description="Reorder points, alerts, auto purchase orders and demand forecasts",
        version=API_VERSION,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Added last runs first: errors are converted inside the request log
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(LoggingMiddleware)

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    for router in (health_router, reorder_router, reports_router):
        app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def root_health() -> dict[str, str]:
        """Liveness probe for container orchestration."""
        return {"status": "healthy", "version": API_VERSION}

    return app


app = create_app()
