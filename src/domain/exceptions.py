"""
Domain exceptions - Semantic error types for the signup form.

This module defines domain-specific exceptions raised when the form
object itself is misused. Validation failures and remote rejections
are not exceptions; they are reported through FormErrors and
SubmissionResult.
"""


class FormError(Exception):
    """Base class for signup form domain errors."""

    pass


class UnknownField(FormError):
    """Change event names a field the form does not have."""

    pass


class FormCompleted(FormError):
    """Form already created a user and accepts no further events."""

    pass


class SubmissionInProgress(FormError):
    """A submission is already in flight for this form instance."""

    pass
