from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from email_writer import __version__
from email_writer.api import email_routes
from email_writer.config import Settings, settings as default_settings
from email_writer.services.llm_service import GeminiClient

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One client for the whole process; routes read it from app.state
        app.state.gemini_client = GeminiClient.from_settings(settings)
        logger.info(f"Gemini client ready: model={app.state.gemini_client.model_id}")
        if not settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY is not set; generation requests will fail")
        yield

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Generates professional email replies with Gemini",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── CORS ────────────────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ─────────────────────────────────────────────────────────────

    app.include_router(email_routes.router, prefix="/api/gemini", tags=["Email Replies"])

    # ── Health Check ────────────────────────────────────────────────────────

    @app.get("/api/health")
    async def health_check():
        return {"status": "healthy", "app": settings.app_name, "version": __version__}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "email_writer.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
