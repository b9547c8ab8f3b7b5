"""
Form view - Render model for the signup form.

Turns form state into the attributes a front-end needs to draw the
form: accessibility flags, error text, border colours and the submit
button state. Presentation values come from the injected FormTheme.
"""

from src.api.models import ButtonView, FormView, InputView
from src.config.theme import FormTheme
from src.domain.rules import password_criteria
from src.domain.validation import FieldError, FormErrors, FormSnapshot

SUBMIT_LABEL = "Create User"


def _input_view(
    name: str, input_type: str, error: FieldError | None, theme: FormTheme
) -> InputView:
    label = name.capitalize()
    invalid = error is not None and error.invalid
    return InputView(
        id=label,
        name=name,
        type=input_type,
        label=label,
        placeholder=f"Enter your {name}",
        aria_invalid=invalid,
        aria_describedby=f"{name}-error" if invalid else None,
        error_message=error.message if error is not None else None,
        border_color=theme.invalid_border_color if invalid else theme.border_color,
        background=theme.input_background,
    )


def build_form_view(
    snapshot: FormSnapshot,
    errors: FormErrors,
    is_submitting: bool,
    theme: FormTheme,
) -> FormView:
    """Build the render model for the current form state."""
    button = ButtonView(
        label=SUBMIT_LABEL,
        disabled=is_submitting,
        opacity=theme.disabled_opacity if is_submitting else 1.0,
        background=theme.button_background,
        color=theme.button_text_color,
    )
    return FormView(
        inputs=[
            _input_view("username", "text", errors.username, theme),
            _input_view("password", "password", errors.password, theme),
        ],
        password_criteria=password_criteria(snapshot.password),
        button=button,
        submit_error=errors.submit,
        background=theme.wrapper_background,
        error_color=theme.error_text_color,
        criteria_color=theme.criteria_text_color,
        font_size_px=theme.font_size_px,
    )
