"""
Rule engine - Username and password rule checks.

Each check is a pure function of a single string and returns a
fixed-shape status record with one boolean per named rule. Nothing here
raises or keeps state; the records are recomputed on every call.

Username rules:
- 3 to 20 characters
- only letters, digits, "." and "_"
- does not start or end with "." or "_"
- no two "." / "_" characters in a row

Password rules:
- 10 to 24 characters
- at least one digit, one uppercase and one lowercase letter
- no whitespace
"""

import re
from dataclasses import astuple, dataclass

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 10
PASSWORD_MAX_LENGTH = 24

_USERNAME_CHARACTERS_RE = re.compile(r"[A-Za-z0-9._]+")
_EDGE_SPECIAL_RE = re.compile(r"^[._]|[._]\Z")
_CONSECUTIVE_SPECIAL_RE = re.compile(r"[._]{2,}")

_WHITESPACE_RE = re.compile(r"\s")
_DIGIT_RE = re.compile(r"[0-9]")
_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")


@dataclass(frozen=True)
class UsernameRuleStatus:
    """Pass/fail per username rule."""

    min_length: bool
    max_length: bool
    valid_characters: bool
    no_leading_or_trailing_special: bool
    no_consecutive_special: bool

    @property
    def is_valid(self) -> bool:
        return all(astuple(self))


@dataclass(frozen=True)
class PasswordRuleStatus:
    """Pass/fail per password rule."""

    min_length: bool
    max_length: bool
    has_number: bool
    has_upper: bool
    has_lower: bool
    no_spaces: bool

    @property
    def is_valid(self) -> bool:
        return all(astuple(self))


def check_username_rules(username: str) -> UsernameRuleStatus:
    """Evaluate every username rule against ``username``."""
    return UsernameRuleStatus(
        # Lengths count code points, not UTF-16 code units.
        min_length=len(username) >= USERNAME_MIN_LENGTH,
        max_length=len(username) <= USERNAME_MAX_LENGTH,
        valid_characters=_USERNAME_CHARACTERS_RE.fullmatch(username) is not None,
        no_leading_or_trailing_special=_EDGE_SPECIAL_RE.search(username) is None,
        no_consecutive_special=_CONSECUTIVE_SPECIAL_RE.search(username) is None,
    )


def check_password_rules(password: str) -> PasswordRuleStatus:
    """Evaluate every password rule against ``password``."""
    return PasswordRuleStatus(
        # Code points, as for usernames.
        min_length=len(password) >= PASSWORD_MIN_LENGTH,
        max_length=len(password) <= PASSWORD_MAX_LENGTH,
        has_number=_DIGIT_RE.search(password) is not None,
        has_upper=_UPPER_RE.search(password) is not None,
        has_lower=_LOWER_RE.search(password) is not None,
        no_spaces=_WHITESPACE_RE.search(password) is None,
    )


def password_criteria(password: str | None) -> list[str]:
    """
    Build the live list of password deficiencies for inline display.

    One message per failing rule class, in a fixed order. An empty list
    means every criterion is met. This list is informational only and
    does not decide whether the form may be submitted.

    Args:
        password: Current password value (None is treated as empty)

    Returns:
        Ordered list of human-readable messages
    """
    rules = check_password_rules(password or "")
    messages: list[str] = []

    if not rules.no_spaces:
        messages.append("Password cannot contain spaces")
    if not rules.min_length or not rules.max_length:
        messages.append(
            f"Password must be between {PASSWORD_MIN_LENGTH} and "
            f"{PASSWORD_MAX_LENGTH} characters long"
        )
    if not rules.has_number:
        messages.append("Password must contain at least one number")
    if not rules.has_upper:
        messages.append("Password must contain at least one uppercase letter")
    if not rules.has_lower:
        messages.append("Password must contain at least one lowercase letter")

    return messages
