"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tipsdoc.config import get_settings
from tipsdoc.infrastructure.logging.log_config import setup_logging
from tipsdoc.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report the content root."""
    settings = get_settings()
    setup_logging()

    content_dir = Path(settings.content_dir)
    if content_dir.is_dir():
        logger.info("Serving articles from %s (pattern %s)", content_dir.resolve(), settings.content_glob)
    else:
        logger.warning("Content directory %s does not exist; article routes will return 404", content_dir)

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tipsdoc.main:app",
        host="0.0.0.0",
        port=8040,
        reload=True,
    )
