"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interface (port) that the form requires from
the remote signup service, together with the value types that cross
that boundary. Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class FormPhase(str, Enum):
    """
    Lifecycle phases of a single form instance.

    Transitions:
    - EDITING -> VALIDATING (change or submit, synchronous)
    - VALIDATING -> EDITING (change, or submit with errors)
    - VALIDATING -> SUBMITTING (submit with a valid snapshot)
    - SUBMITTING -> EDITING (remote failure, submit error set)
    - SUBMITTING -> COMPLETED (remote success)

    Terminal States:
    - COMPLETED: User created, no further transitions
    """

    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    COMPLETED = "completed"


class SubmissionFailure(str, Enum):
    """Reason a submission did not create a user."""

    NOT_AUTHENTICATED = "not_authenticated"
    PASSWORD_REJECTED = "password_rejected"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"


FAILURE_MESSAGES = {
    SubmissionFailure.NOT_AUTHENTICATED: "Not authenticated to access this resource.",
    SubmissionFailure.PASSWORD_REJECTED: (
        "Sorry, the entered password is not allowed, please try a different one."
    ),
    SubmissionFailure.SERVER_ERROR: "Something went wrong, please try again.",
    SubmissionFailure.NETWORK_ERROR: "Network error. Please try again later.",
}


@dataclass(frozen=True)
class SignupPayload:
    """Body sent to the signup service."""

    username: str
    password: str

    def as_dict(self) -> dict[str, str]:
        return {"username": self.username, "password": self.password}


@dataclass(frozen=True)
class SubmissionResult:
    """
    Outcome of a single submission attempt.

    Either ``success=True`` with no message, or ``success=False`` with the
    user-facing message and the failure reason it was derived from.
    """

    success: bool
    message: str | None = None
    failure: SubmissionFailure | None = None

    @classmethod
    def ok(cls) -> "SubmissionResult":
        return cls(success=True)

    @classmethod
    def failed(cls, failure: SubmissionFailure) -> "SubmissionResult":
        return cls(success=False, message=FAILURE_MESSAGES[failure], failure=failure)


class SignupClient(Protocol):
    """Port interface for the remote signup service."""

    async def submit(self, payload: SignupPayload) -> SubmissionResult:
        """
        Send the validated payload to the signup service.

        Implementations make a single attempt and never raise: transport
        problems and unexpected errors are reported as a NETWORK_ERROR
        result.

        Args:
            payload: Username and password that passed strict validation

        Returns:
            SubmissionResult describing success or the failure reason
        """
        ...
