from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from datastore.reading_store import build_default_store
from logging_config import configure_logging
from services.predictor import build_default_predictor


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    build_default_predictor()
    try:
        yield
    finally:
        build_default_predictor.cache_clear()
        build_default_store.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Rockfall Risk Monitor",
        description="Rule-based rockfall risk assessment over geotechnical sensor windows.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
