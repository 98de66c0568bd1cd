"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before reading settings
load_dotenv()

# Add src to path
# main.py is at /app/src/api/main.py
# src is at /app/src, so we go up 2 levels
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.dependencies import init_app_state
from api.routes import accounts, health, profile
from utils.config import load_settings
from utils.logging import setup_structured_logging
from adapter.mongodb.connection import ping
from adapter.mongodb.indexes import ensure_all_indexes

# Set up structured JSON logging
setup_structured_logging(os.getenv("LOG_LEVEL", "INFO").upper())

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Accounts API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build collaborators, ensure indexes, close the client."""
    settings = load_settings()
    init_app_state(app.state, settings)

    client = app.state.mongo_client
    if ping(client):
        db = client[settings.mongodb_database]
        if ensure_all_indexes(db):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield  # App runs here

    client.close()


# Create FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Account registration, login, profile and email verification",
    version=VERSION,
    lifespan=lifespan,
)

# With JWTs in the Authorization header:
# - CORS_ORIGINS="*": allow_credentials must be False (browsers reject credentials with wildcard)
# - explicit comma-separated list: allow_credentials can be True
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'http://localhost:4200')"
    )
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(accounts.router)
app.include_router(profile.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = load_settings().port
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False  # Structured application logs already cover requests
    )
