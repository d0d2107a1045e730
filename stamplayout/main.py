# stamplayout/main.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stamplayout.api import routers
from stamplayout.core.config import get_settings
from stamplayout.core.logging import configure_logging

settings = get_settings()
logger = configure_logging(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    # Credentials cannot be combined with a wildcard origin.
    allow_credentials="*" not in settings.allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

for router in routers:
    app.include_router(router)


@app.get("/health")
async def health_check() -> dict:
    logger.debug("Health check invoked")
    return {"status": "ok", "message": f"{settings.app_name} is running"}
