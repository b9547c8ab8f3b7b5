"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validation rules and the form state machine
for user signup. It defines its own port interface for the remote
signup service, ensuring true hexagonal architecture decoupling.
"""

from .exceptions import FormCompleted, FormError, SubmissionInProgress, UnknownField
from .form import CreateUserForm
from .ports import FormPhase, SignupClient, SignupPayload, SubmissionFailure, SubmissionResult
from .rules import check_password_rules, check_username_rules, password_criteria
from .validation import FieldError, FormErrors, FormSnapshot, validate

__all__ = [
    "CreateUserForm",
    "FieldError",
    "FormCompleted",
    "FormError",
    "FormErrors",
    "FormPhase",
    "FormSnapshot",
    "SignupClient",
    "SignupPayload",
    "SubmissionFailure",
    "SubmissionInProgress",
    "SubmissionResult",
    "UnknownField",
    "check_password_rules",
    "check_username_rules",
    "password_criteria",
    "validate",
]
