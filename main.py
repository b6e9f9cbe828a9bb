# main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from core.services.chain_registry import get_chain_table
from adapters.entry.http.views.chains_view import router as chains_router
from adapters.entry.http.views.strategies_view import router as strategies_router


def init_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context.

    Builds the chain registry table once on startup so a broken static
    configuration fails the boot instead of the first request.
    """
    app.state.chain_table = get_chain_table()
    yield
    # No special shutdown logic needed for now.


def create_app() -> FastAPI:
    """
    Application factory for the registry and strategies API.
    """
    init_logging()

    app = FastAPI(
        title="Chain Registry API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(chains_router, prefix="/api")
    app.include_router(strategies_router, prefix="/api")

    return app


app = create_app()
