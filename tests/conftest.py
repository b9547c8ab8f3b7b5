"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Mocked signup client port
- httpx mock transports for the HTTP adapter
- Settings cache isolation
"""

from collections.abc import Callable, Generator
from unittest.mock import AsyncMock

import httpx
import pytest

from src.adapters.signup.http import HttpSignupClient
from src.config.settings import get_settings
from src.domain.ports import SubmissionResult


@pytest.fixture
def signup_url() -> str:
    """URL of the fake signup endpoint."""
    return "https://signup.test/challenge-signup"


@pytest.fixture
def signup_token() -> str:
    """Bearer token used by test clients."""
    return "test-token"


@pytest.fixture
def signup_client() -> AsyncMock:
    """Mocked SignupClient that accepts every submission."""
    client = AsyncMock(spec=HttpSignupClient)
    client.submit.return_value = SubmissionResult.ok()
    return client


@pytest.fixture
def make_http_client(
    signup_url: str, signup_token: str
) -> Callable[[Callable[[httpx.Request], httpx.Response]], HttpSignupClient]:
    """Factory for HttpSignupClient instances backed by an httpx.MockTransport."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HttpSignupClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return HttpSignupClient(url=signup_url, token=signup_token, client=http)

    return factory


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
