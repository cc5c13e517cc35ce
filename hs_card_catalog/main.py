from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from pathlib import Path
from typing import Optional
import logging
import uvicorn

# Load environment variables before settings are read
load_dotenv()

from .config import Settings, settings
from .interfaces.scheduler import IScheduler
from .models.responses import HealthResponse
from .routers import api_router, views_router
from .scheduling.asyncio_scheduler import AsyncioScheduler
from .services.card_source import HttpCardSource
from .services.catalog_cache import CatalogCache
from .views import error_page, render

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

NOT_FOUND_MESSAGE = "Page not found."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def create_app(
    app_settings: Optional[Settings] = None,
    catalog: Optional[CatalogCache] = None,
    scheduler: Optional[IScheduler] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        app_settings: Configuration (defaults to the environment-derived settings)
        catalog: Catalog cache to serve (defaults to one fed by the HTTP card source)
        scheduler: Runs catalog refreshes (defaults to an asyncio scheduler)

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or settings
    if catalog is None:
        catalog = CatalogCache(
            HttpCardSource(app_settings.catalog_url, timeout=app_settings.fetch_timeout_seconds)
        )
    if scheduler is None:
        scheduler = AsyncioScheduler()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        logger.info(f"[STARTUP] Starting {app_settings.app_name} v{app_settings.app_version}...")

        # Fetch at startup, then on a fixed interval for the life of the process
        scheduler.run_now(catalog.refresh)
        scheduler.run_every(app_settings.refresh_interval_seconds, catalog.refresh)
        logger.info(
            f"Catalog refresh scheduled every {app_settings.refresh_interval_seconds:,.0f}s "
            f"from {app_settings.catalog_url}"
        )

        yield

        logger.info(f"Shutting down {app_settings.app_name}...")
        await scheduler.shutdown()

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="Search and filter the collectible Hearthstone card catalog",
        lifespan=lifespan
    )

    # Store in app state
    app.state.settings = app_settings
    app.state.catalog = catalog
    app.state.scheduler = scheduler

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
        message = NOT_FOUND_MESSAGE if exc.status_code == 404 else str(exc.detail)
        return HTMLResponse(
            render(error_page(message)),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> HTMLResponse:
        logger.error(f"Internal Server Error on {request.method} {request.url.path}", exc_info=exc)
        return HTMLResponse(render(error_page(INTERNAL_ERROR_MESSAGE)), status_code=500)

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint"""
        card_count = len(catalog.current_snapshot())
        return HealthResponse(status="healthy", catalog_ready=card_count > 0, card_count=card_count)

    app.include_router(api_router)
    app.include_router(views_router)

    # Mount the static files directory
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


app = create_app()


def run() -> None:
    """Console entry point"""
    uvicorn.run(
        "hs_card_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
