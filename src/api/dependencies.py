"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the signup
client and presentation settings into routes.
"""

from fastapi import Request

from src.config.settings import get_settings
from src.config.theme import FormTheme
from src.domain.ports import SignupClient


def get_signup_client(request: Request) -> SignupClient:
    """
    Get signup client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.signup_client


def get_theme() -> FormTheme:
    """Get the configured form theme."""
    return get_settings().theme
