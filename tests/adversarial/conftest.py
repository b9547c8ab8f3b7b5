"""
Shared fixtures for adversarial tests.

Provides a signup client whose submissions block until released, so
tests can act while a submission is in flight.
"""

import asyncio

import pytest

from src.domain.ports import SignupPayload, SubmissionResult

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


class GatedSignupClient:
    """SignupClient whose submit waits for an explicit release."""

    def __init__(self, result: SubmissionResult | None = None) -> None:
        self.result = result or SubmissionResult.ok()
        self.payloads: list[SignupPayload] = []
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def submit(self, payload: SignupPayload) -> SubmissionResult:
        self.payloads.append(payload)
        self.started.set()
        await self.release.wait()
        return self.result


@pytest.fixture
def gated_client() -> GatedSignupClient:
    """Create a gated signup client for each test."""
    return GatedSignupClient()
