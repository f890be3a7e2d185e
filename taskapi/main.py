"""
FastAPI application

Main entry point for the Task API.
Register your routers here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from taskapi.api.errors import validation_exception_handler
from taskapi.api.routes import health, tasks
from taskapi.core.config import settings
from taskapi.db.base import Base
from taskapi.db.database import engine

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events"""
    # Import models to ensure they're registered with Base
    from taskapi.db import models  # noqa: F401

    # checkfirst=True only creates missing tables
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database tables initialized")

    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
    description="Task API - CRUD service for task records",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structural validation failures become 400 field-to-message maps
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Register routers
app.include_router(health.router, tags=["Health"])
app.include_router(tasks.router, prefix=f"{settings.API_V1_STR}/tasks", tags=["Tasks"])
