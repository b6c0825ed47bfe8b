"""
Sales Agency CRM - FastAPI Application
Main entry point with all routes configured.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salesagency.config import settings
from salesagency.core.exceptions import NotFoundError, QueryError, ValidationError
from salesagency.database import Database
from salesagency.schemas.common import HealthResponse

# Import all API routers
from salesagency.api import (
    leads, interactions, clients, catalog, agents, agent_stats,
    campaigns, targets, campaign_metrics, templates, users, training
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup: a database that does not answer is fatal
    db = await Database.initialize()
    if settings.DB_CREATE_SCHEMA:
        await db.create_schema()
    app.state.db = db
    yield
    # Shutdown
    await db.close()


app = FastAPI(
    title="Sales Agency CRM API",
    description="Leads, clients, AI agents and campaigns for an AI-driven sales agency",
    version=VERSION,
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(QueryError)
async def query_error_handler(request: Request, exc: QueryError):
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    # Driver detail stays in the log
    return JSONResponse(status_code=500, content={"detail": exc.context})


# Include all routers
for module in (
    leads, interactions, clients, catalog, agents, agent_stats,
    campaigns, targets, campaign_metrics, templates, users, training
):
    app.include_router(module.router, prefix=settings.API_PREFIX)


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return HealthResponse(version=VERSION)


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run("salesagency.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEV_MODE)
