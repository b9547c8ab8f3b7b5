"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, the signup client, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.signup.http import HttpSignupClient
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Signup Form API v1 - Validate form input and create users",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Applies the configured log level
    - Creates the signup client on startup
    - Closes the signup client on shutdown
    """
    settings = get_settings()
    logging.getLogger("src").setLevel(settings.log_level.upper())

    logger.info("Starting application...")
    if not settings.signup_token.get_secret_value():
        logger.warning("SIGNUP_TOKEN is not set; the signup service will reject submissions")

    signup_client = HttpSignupClient(
        url=settings.signup_url,
        token=settings.signup_token.get_secret_value(),
        timeout=settings.signup_timeout_seconds,
    )

    # Store client in app state for dependency injection
    app.state.signup_client = signup_client

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await signup_client.aclose()
    logger.info("Signup client closed")


app = FastAPI(
    title="signupform",
    description="Signup Form API - Username and password validation with remote user creation",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns 200 OK while the application is serving requests.
    """
    return {"status": "healthy"}
