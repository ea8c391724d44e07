"""
Application entry point.
Run with:  uvicorn menu_catalog.main:app --reload
or:        python -m menu_catalog.main

The menu document is seeded automatically on startup when the data file
does not exist yet (see menu_catalog/db/seeder.py).
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from menu_catalog.core.logging_config import configure_logging
from menu_catalog.core.config import settings
from menu_catalog.core.exceptions import register_exception_handlers
from menu_catalog.api.router import api_router
from menu_catalog.db.store import MenuStore

STATIC_DIR = Path(__file__).resolve().parent / "static"

configure_logging()


def create_app(store: Optional[MenuStore] = None) -> FastAPI:
    """Create and configure the FastAPI application instance."""
    logger = logging.getLogger(__name__)
    logger.info("Starting FastAPI application setup")
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="REST API and browser client for a restaurant menu catalog.",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.store = store or MenuStore(settings.MENU_DATA_FILE)
    logger.info("Menu data file: %s", app.state.store.path)

    # ── Middleware ──────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ──────────────────────────────────────────────────────────────
    register_exception_handlers(app)

    # ── Routers ─────────────────────────────────────────────────────────────
    app.include_router(api_router)

    # ── Frontend ────────────────────────────────────────────────────────────
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    def index() -> FileResponse:
        """Serve the browser client."""
        return FileResponse(STATIC_DIR / "index.html")

    # ── Startup / shutdown events ───────────────────────────────────────────
    @app.on_event("startup")
    def on_startup() -> None:
        """Make sure the menu data file exists, seeding it if needed."""
        logger.info("Loading menu data")
        document = app.state.store.load()
        logger.info(
            "Menu ready: %s categories, %s items",
            len(document.categories),
            len(document.items),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.getLogger(__name__).info(
        "Restaurant Menu Service running on http://%s:%s (API under /api)",
        settings.HOST,
        settings.PORT,
    )
    uvicorn.run(
        "menu_catalog.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower() if settings.LOG_LEVEL.upper() != "TRACE" else "trace",
    )
