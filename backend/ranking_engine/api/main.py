from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ranking_engine.api.routers import health, ranking
from ranking_engine.api.routers.health import SERVICE_VERSION


def create_app() -> FastAPI:
    app = FastAPI(title="Ranking Engine API", version=SERVICE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[os.getenv("FRONTEND_ORIGIN", "http://localhost:3000")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(ranking.router)
    return app


app = create_app()
