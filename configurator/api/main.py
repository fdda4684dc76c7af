"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from configurator.api.routes import router
from configurator.config import configure_logging


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Door Configurator",
        description="Pricing and configuration engine for custom interior doors",
        version="0.1.0",
    )

    # CORS: allow the frontend dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
