"""
HTTP signup client adapter - Implements SignupClient protocol.

This module provides the httpx implementation of the domain's signup
port. One POST per submission, no retries. Redirects are followed and
the final response status maps to a SubmissionResult:

- 401 / 403 -> NOT_AUTHENTICATED
- 400 -> PASSWORD_REJECTED
- any other non-2xx -> SERVER_ERROR
- transport failure or timeout -> NETWORK_ERROR
"""

import logging

import httpx

from src.domain.ports import SignupPayload, SubmissionFailure, SubmissionResult

logger = logging.getLogger(__name__)


def result_for_status(status_code: int) -> SubmissionResult:
    """Map a signup service response status to a SubmissionResult."""
    if status_code in (401, 403):
        return SubmissionResult.failed(SubmissionFailure.NOT_AUTHENTICATED)
    if status_code == 400:
        return SubmissionResult.failed(SubmissionFailure.PASSWORD_REJECTED)
    if not 200 <= status_code < 300:
        return SubmissionResult.failed(SubmissionFailure.SERVER_ERROR)
    return SubmissionResult.ok()


class HttpSignupClient:
    """
    Implements SignupClient protocol via httpx.AsyncClient.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The bearer token is injected configuration, never derived from
    form state.
    """

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize client for a signup endpoint.

        Args:
            url: Absolute URL of the signup endpoint
            token: Bearer token sent in the Authorization header
            timeout: Seconds before a submission counts as a network error
            client: Optional pre-built AsyncClient (owned by the caller)
        """
        self._url = url
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def submit(self, payload: SignupPayload) -> SubmissionResult:
        """
        POST the payload to the signup endpoint.

        Never raises: transport errors and unexpected exceptions are
        logged and reported as NETWORK_ERROR.

        Args:
            payload: Validated username and password

        Returns:
            SubmissionResult for the single attempt
        """
        try:
            response = await self._client.post(
                self._url,
                json=payload.as_dict(),
                headers=self._headers,
                follow_redirects=True,
            )
        except httpx.TransportError as e:
            logger.warning("Signup request failed for %s: %r", payload.username, e)
            return SubmissionResult.failed(SubmissionFailure.NETWORK_ERROR)
        except Exception:
            logger.exception("Submission error for username %s", payload.username)
            return SubmissionResult.failed(SubmissionFailure.NETWORK_ERROR)

        result = result_for_status(response.status_code)
        if result.success:
            logger.info("Signup accepted for %s", payload.username)
        else:
            logger.warning(
                "Signup rejected for %s: status=%s reason=%s",
                payload.username,
                response.status_code,
                result.failure.value,
            )
        return result

    async def aclose(self) -> None:
        """Close the underlying AsyncClient if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
