"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from lizard_game.config import ServerConfig
from lizard_game.server.routes import router
from lizard_game.server.session_manager import SessionManager


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session_manager = SessionManager(config)
        yield

    app = FastAPI(
        title="Lizard Puzzle API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    return app
