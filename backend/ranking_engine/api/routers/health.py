from __future__ import annotations

from fastapi import APIRouter

SERVICE_NAME = "ranking-engine"
SERVICE_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}
