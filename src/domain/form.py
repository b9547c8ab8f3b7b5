"""
Create-user form - Validation and submission state machine.

This module holds the state of a single signup form instance and drives
it through its lifecycle.

Form State Machine
==================

States:
- EDITING: Default state, accepts change and submit events
- VALIDATING: Synchronous validation pass (change or submit)
- SUBMITTING: Payload sent to the signup service, submit control disabled
- COMPLETED: Terminal state after the service created the user

Transitions:
    EDITING -> VALIDATING -> EDITING      (change, or submit with errors)
    EDITING -> VALIDATING -> SUBMITTING   (submit with a valid snapshot)
    SUBMITTING -> EDITING                 (service rejected or unreachable)
    SUBMITTING -> COMPLETED               (user created)

Each form instance owns its state exclusively and allows at most one
submission in flight.
"""

import logging
from collections.abc import Callable
from dataclasses import replace

from .exceptions import FormCompleted, SubmissionInProgress, UnknownField
from .ports import (
    FAILURE_MESSAGES,
    FormPhase,
    SignupClient,
    SignupPayload,
    SubmissionFailure,
    SubmissionResult,
)
from .rules import password_criteria
from .validation import FIELD_NAMES, FormErrors, FormSnapshot, validate

logger = logging.getLogger(__name__)


class CreateUserForm:
    """
    State holder for one signup form session.

    Change events replace the snapshot and the error map wholesale.
    Submit events run the strict validation pass and, when it succeeds,
    hand the payload to the injected signup client.
    """

    def __init__(
        self,
        signup_client: SignupClient,
        on_user_created: Callable[[bool], None] | None = None,
    ) -> None:
        """
        Initialize an empty form.

        Args:
            signup_client: Port used to create the user remotely
            on_user_created: Host callback, called with True once on success
        """
        self._signup_client = signup_client
        self._on_user_created = on_user_created
        self._snapshot = FormSnapshot()
        self._errors = FormErrors()
        self._phase = FormPhase.EDITING
        self._is_submitting = False
        self._last_result: SubmissionResult | None = None

    @property
    def snapshot(self) -> FormSnapshot:
        return self._snapshot

    @property
    def errors(self) -> FormErrors:
        return self._errors

    @property
    def phase(self) -> FormPhase:
        return self._phase

    @property
    def is_submitting(self) -> bool:
        """True while a submission is in flight; disables the submit control."""
        return self._is_submitting

    @property
    def user_was_created(self) -> bool:
        return self._phase == FormPhase.COMPLETED

    @property
    def last_result(self) -> SubmissionResult | None:
        """Result of the most recent settled submission, if any."""
        return self._last_result

    @property
    def password_criteria(self) -> list[str]:
        """Live password deficiencies for the current snapshot."""
        return password_criteria(self._snapshot.password)

    def on_change(self, field: str, value: str) -> FormErrors:
        """
        Apply a field change and run the non-strict validation pass.

        Args:
            field: "username" or "password"
            value: New value of the field

        Returns:
            The recomputed error map

        Raises:
            UnknownField: If field is not a form field
            FormCompleted: If the form already created a user
        """
        self._ensure_open()
        if field not in FIELD_NAMES:
            raise UnknownField(field)

        self._snapshot = replace(self._snapshot, **{field: value})
        self._phase = FormPhase.VALIDATING
        self._errors, _ = validate(self._snapshot, submit_attempt=False)
        # The in-flight payload was captured at submit time.
        self._phase = FormPhase.SUBMITTING if self._is_submitting else FormPhase.EDITING
        return self._errors

    async def on_submit(self) -> bool:
        """
        Run strict validation and, if it passes, submit the form.

        Returns:
            True if the user was created, False otherwise. On False the
            error map explains why and the form is editable again.

        Raises:
            FormCompleted: If the form already created a user
            SubmissionInProgress: If a previous submit has not settled
        """
        self._ensure_open()
        if self._is_submitting:
            raise SubmissionInProgress()

        self._phase = FormPhase.VALIDATING
        errors, valid = validate(self._snapshot, submit_attempt=True)
        self._errors = errors
        if not valid:
            self._phase = FormPhase.EDITING
            return False

        payload = SignupPayload(
            username=self._snapshot.username or "",
            password=self._snapshot.password or "",
        )
        result = await self._submit(payload)
        self._last_result = result

        if result.success:
            self._errors = FormErrors()
            self._phase = FormPhase.COMPLETED
            if self._on_user_created is not None:
                self._on_user_created(True)
            return True

        self._errors = FormErrors(
            submit=result.message or FAILURE_MESSAGES[SubmissionFailure.SERVER_ERROR]
        )
        self._phase = FormPhase.EDITING
        return False

    async def _submit(self, payload: SignupPayload) -> SubmissionResult:
        self._phase = FormPhase.SUBMITTING
        self._is_submitting = True
        try:
            return await self._signup_client.submit(payload)
        except Exception:
            logger.exception("Submission error for username %s", payload.username)
            return SubmissionResult.failed(SubmissionFailure.NETWORK_ERROR)
        finally:
            self._is_submitting = False

    def _ensure_open(self) -> None:
        if self._phase == FormPhase.COMPLETED:
            raise FormCompleted()
