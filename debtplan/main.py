"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debtplan.config import settings
from debtplan.api.routes import payoff, strategies

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting %s (horizon %d months)", settings.app_name, settings.max_months)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Project debt payoff schedules and compare snowball and avalanche plans",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(payoff.router, prefix="/api/payoff", tags=["payoff"])
app.include_router(strategies.router, prefix="/api/strategies", tags=["strategies"])


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": settings.app_name}


@app.get("/health")
async def health():
    """Health check for monitoring."""
    return {"status": "healthy"}
