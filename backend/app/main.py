"""FastAPI application serving week and slate projections."""

import logging
import sys
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Add parent directory to path to import tools
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app.api import projection
from app.config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

PROJECTION_ENDPOINTS = [
    "/api/projection/matchup",
    "/api/projection/slate",
    "/api/projection/starts",
    "/api/projection/week",
]

app = FastAPI(title=settings.app_name, debug=settings.debug, version=settings.version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(projection.router, prefix="/api/projection", tags=["projection"])
logger.debug(f"CORS origins: {settings.allowed_origins}")


@app.get("/")
async def root():
    """Service name, version and the projection routes."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "status": "running",
        "endpoints": PROJECTION_ENDPOINTS,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
