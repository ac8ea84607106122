"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unkindred.api.dependencies import set_session_manager
from unkindred.api.routes import api_router
from unkindred.api.session_manager import SessionManager
from unkindred.config import GameConfig
from unkindred.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = SessionManager(_config)
        set_session_manager(manager)
        logger.info("API server started — session ready.")
        yield
        manager.close()
        set_session_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Unkindred Hearts",
        description=(
            "Turn-based roguelike core over HTTP.\n\n"
            "## API Groups\n\n"
            "- **State** — What the player sees: status, visible entities, messages, composed frame\n"
            "- **Map** — Explored tiles (unexplored cells are hidden)\n"
            "- **Control** — One key event per request; session reset\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Player-visible state after the latest tick."},
            {"name": "Map", "description": "Explored map, RLE-encoded. Grows as the player explores."},
            {"name": "Control", "description": "Key input (exactly one tick per request) and reset."},
            {"name": "Config", "description": "Read-only game configuration parameters."},
        ],
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
