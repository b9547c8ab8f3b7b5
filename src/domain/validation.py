"""
Form validator - Composes rule results into field and submit errors.

The error map is recomputed from scratch on every call. Nothing is
patched or merged, so an error can never outlive the input that caused
it. The same snapshot and flag always produce the same errors.
"""

from dataclasses import dataclass

from .rules import check_password_rules, check_username_rules

USERNAME_REQUIRED = "Username is required."
USERNAME_LENGTH = "Username must be between 3 and 20 characters long."
USERNAME_CHARACTERS = 'Username can only contain letters, numbers, ".", or "_."'
USERNAME_EDGE_SPECIAL = 'Username cannot start or end with "." or "_."'
USERNAME_CONSECUTIVE_SPECIAL = 'Username cannot contain consecutive "." or "_."'
PASSWORD_REQUIRED = "Password is required."
SUBMIT_BLOCKED = "Please fix the errors before submitting."

FIELD_NAMES = ("username", "password")


@dataclass(frozen=True)
class FormSnapshot:
    """Current field values of one form session."""

    username: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class FieldError:
    """Validation failure for a single input."""

    message: str | None = None
    invalid: bool = True


@dataclass(frozen=True)
class FormErrors:
    """Per-field errors plus an optional form-level submit error."""

    username: FieldError | None = None
    password: FieldError | None = None
    submit: str | None = None

    @property
    def has_field_errors(self) -> bool:
        return self.username is not None or self.password is not None

    def __bool__(self) -> bool:
        """Truthy when any error is present."""
        return self.has_field_errors or self.submit is not None


def _username_error(username: str | None) -> FieldError | None:
    if not username:
        return FieldError(message=USERNAME_REQUIRED)

    rules = check_username_rules(username)
    if not rules.min_length or not rules.max_length:
        return FieldError(message=USERNAME_LENGTH)
    if not rules.valid_characters:
        return FieldError(message=USERNAME_CHARACTERS)
    if not rules.no_leading_or_trailing_special:
        return FieldError(message=USERNAME_EDGE_SPECIAL)
    if not rules.no_consecutive_special:
        return FieldError(message=USERNAME_CONSECUTIVE_SPECIAL)
    return None


def _password_error(password: str | None) -> FieldError | None:
    # Detailed password feedback comes from rules.password_criteria(), so
    # a failing rule only flags the field as invalid.
    if not password:
        return FieldError(message=PASSWORD_REQUIRED)

    rules = check_password_rules(password)
    if not (rules.min_length and rules.max_length):
        return FieldError()
    if not rules.has_number or not rules.has_upper or not rules.has_lower:
        return FieldError()
    return None


def validate(snapshot: FormSnapshot, submit_attempt: bool) -> tuple[FormErrors, bool]:
    """
    Validate a full form snapshot.

    Username errors report only the first failing rule, checked in the
    order length, allowed characters, leading/trailing special,
    consecutive special. Password errors carry no message unless the
    password is missing. Whitespace in the password is left to the live
    criteria list.

    Args:
        snapshot: Current field values
        submit_attempt: True for the strict pass triggered by submit

    Returns:
        Tuple of (errors, valid) where valid is True iff errors is empty
    """
    username_error = _username_error(snapshot.username)
    password_error = _password_error(snapshot.password)

    submit_error = None
    if submit_attempt and (username_error or password_error):
        submit_error = SUBMIT_BLOCKED

    errors = FormErrors(username=username_error, password=password_error, submit=submit_error)
    return errors, not errors
