"""
Unit tests for the form view builder.

Tests verify the render model derived from form state and theme.
"""

from src.api.view import build_form_view
from src.config.theme import FormTheme
from src.domain.validation import FieldError, FormErrors, FormSnapshot

THEME = FormTheme()


class TestInputs:
    """Tests for per-input render state."""

    def test_valid_inputs(self) -> None:
        """Inputs without errors use the normal border and no aria links."""
        view = build_form_view(
            FormSnapshot(username="validUser", password="ValidPass123"),
            FormErrors(),
            is_submitting=False,
            theme=THEME,
        )

        username, password = view.inputs
        assert username.id == "Username"
        assert username.name == "username"
        assert username.type == "text"
        assert username.placeholder == "Enter your username"
        assert username.aria_invalid is False
        assert username.aria_describedby is None
        assert username.border_color == THEME.border_color
        assert username.background == THEME.input_background

        assert password.id == "Password"
        assert password.type == "password"
        assert password.placeholder == "Enter your password"
        assert password.background == THEME.input_background

    def test_invalid_input_without_message(self) -> None:
        """A message-less password error still flags and styles the input."""
        view = build_form_view(
            FormSnapshot(username="validUser", password="short"),
            FormErrors(password=FieldError()),
            is_submitting=False,
            theme=THEME,
        )

        password = view.inputs[1]
        assert password.aria_invalid is True
        assert password.aria_describedby == "password-error"
        assert password.error_message is None
        assert password.border_color == THEME.invalid_border_color

    def test_invalid_input_with_message(self) -> None:
        """Field messages are exposed for display."""
        view = build_form_view(
            FormSnapshot(),
            FormErrors(username=FieldError(message="Username is required.")),
            is_submitting=False,
            theme=THEME,
        )
        assert view.inputs[0].error_message == "Username is required."


class TestButtonAndCriteria:
    """Tests for button state, criteria and submit error."""

    def test_button_disabled_while_submitting(self) -> None:
        """Submitting disables the button and dims it."""
        theme = FormTheme(disabled_opacity=0.3)
        view = build_form_view(FormSnapshot(), FormErrors(), is_submitting=True, theme=theme)

        assert view.button.disabled is True
        assert view.button.opacity == 0.3
        assert view.button.label == "Create User"

    def test_button_enabled_when_idle(self) -> None:
        """Idle form has an enabled, fully opaque button."""
        view = build_form_view(FormSnapshot(), FormErrors(), is_submitting=False, theme=THEME)

        assert view.button.disabled is False
        assert view.button.opacity == 1.0

    def test_criteria_and_submit_error(self) -> None:
        """Criteria list follows the password; submit error is passed through."""
        view = build_form_view(
            FormSnapshot(password="Abcdefg12"),
            FormErrors(submit="Network error. Please try again later."),
            is_submitting=False,
            theme=THEME,
        )

        assert view.password_criteria == [
            "Password must be between 10 and 24 characters long"
        ]
        assert view.submit_error == "Network error. Please try again later."
        assert view.background == THEME.wrapper_background
