# src/tech_news/main.py
"""Main entry point for the Tech News application."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from tech_news.api import comments_router, home_router, posts_router, users_router
from tech_news.api.errors import register_exception_handlers
from tech_news.core.settings import settings
from tech_news.db.session import create_tables

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "public"

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Community link sharing: posts, comments and upvotes",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

register_exception_handlers(app)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Include API routers
app.include_router(users_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(comments_router, prefix="/api")
app.include_router(home_router)


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.auto_create_tables:
        create_tables()
        logger.info("Database tables synchronized")
    logger.info("%s %s ready", settings.app_name, settings.app_version)


@app.get("/health", include_in_schema=False)
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("tech_news.main:app", host=settings.host, port=settings.port, reload=settings.debug)
