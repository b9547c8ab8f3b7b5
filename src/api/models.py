"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.validation import FieldError, FormErrors, FormSnapshot


class CreateUserRequest(BaseModel):
    """Request model for user creation. Missing fields count as empty."""

    username: str | None = Field(default=None, description="Requested username")
    password: str | None = Field(default=None, description="Requested password")

    def to_snapshot(self) -> FormSnapshot:
        return FormSnapshot(username=self.username, password=self.password)


class ValidateRequest(CreateUserRequest):
    """Request model for live validation of the current form values."""

    submit_attempt: bool = Field(
        default=False,
        description="Run the strict pass that also reports a submit-level error",
    )


class FieldErrorModel(BaseModel):
    """Error state of a single input."""

    message: str | None = None
    invalid: bool

    @classmethod
    def from_domain(cls, error: FieldError | None) -> "FieldErrorModel | None":
        if error is None:
            return None
        return cls(message=error.message, invalid=error.invalid)


class FormErrorsModel(BaseModel):
    """Per-field errors plus the optional submit-level error."""

    username: FieldErrorModel | None = None
    password: FieldErrorModel | None = None
    submit: str | None = None

    @classmethod
    def from_domain(cls, errors: FormErrors) -> "FormErrorsModel":
        return cls(
            username=FieldErrorModel.from_domain(errors.username),
            password=FieldErrorModel.from_domain(errors.password),
            submit=errors.submit,
        )


class ValidateResponse(BaseModel):
    """Response model for live validation."""

    valid: bool
    errors: FormErrorsModel
    password_criteria: list[str]


class CreateUserResponse(BaseModel):
    """Response model for successful user creation."""

    message: str
    username: str


class FormErrorResponse(BaseModel):
    """Error response carrying the form's error map."""

    detail: str
    errors: FormErrorsModel


class InputView(BaseModel):
    """Render state of one form input."""

    id: str
    name: str
    type: str
    label: str
    placeholder: str
    aria_invalid: bool
    aria_describedby: str | None = None
    error_message: str | None = None
    border_color: str
    background: str


class ButtonView(BaseModel):
    """Render state of the submit button."""

    label: str
    disabled: bool
    opacity: float
    background: str
    color: str


class FormView(BaseModel):
    """Complete render model of the signup form."""

    inputs: list[InputView]
    password_criteria: list[str]
    button: ButtonView
    submit_error: str | None = None
    background: str
    error_color: str
    criteria_color: str
    font_size_px: int
