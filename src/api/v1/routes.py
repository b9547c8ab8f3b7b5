"""
API v1 routes.

Defines REST endpoints for the signup form API.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_signup_client, get_theme
from src.api.models import (
    CreateUserRequest,
    CreateUserResponse,
    FormErrorResponse,
    FormErrorsModel,
    FormView,
    ValidateRequest,
    ValidateResponse,
)
from src.api.view import build_form_view
from src.config.theme import FormTheme
from src.domain.form import CreateUserForm
from src.domain.ports import FAILURE_MESSAGES, SignupClient, SubmissionFailure
from src.domain.rules import password_criteria
from src.domain.validation import FIELD_NAMES, SUBMIT_BLOCKED, validate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

_FAILURE_STATUS = {
    SubmissionFailure.PASSWORD_REJECTED: status.HTTP_400_BAD_REQUEST,
    SubmissionFailure.NOT_AUTHENTICATED: status.HTTP_502_BAD_GATEWAY,
    SubmissionFailure.SERVER_ERROR: status.HTTP_502_BAD_GATEWAY,
    SubmissionFailure.NETWORK_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@router.post(
    "/form/validate",
    response_model=ValidateResponse,
    response_model_exclude_none=True,
    summary="Validate form input",
    description="Run the form validation pass over the current field values. "
    "Set submit_attempt to run the strict pass used on submit.",
)
async def validate_form(request_data: ValidateRequest) -> ValidateResponse:
    """
    Validate the current form values.

    - **username** / **password**: current field values (may be missing)
    - **submit_attempt**: strict pass, adds a submit-level error

    Always returns 200; validity is reported in the body.
    """
    snapshot = request_data.to_snapshot()
    errors, valid = validate(snapshot, request_data.submit_attempt)
    return ValidateResponse(
        valid=valid,
        errors=FormErrorsModel.from_domain(errors),
        password_criteria=password_criteria(snapshot.password),
    )


@router.post(
    "/form/view",
    response_model=FormView,
    summary="Render form state",
    description="Build the render model of the form for the given field values.",
)
async def render_form(
    request_data: ValidateRequest,
    theme: FormTheme = Depends(get_theme),
) -> FormView:
    """Return inputs, criteria list and button state for the current values."""
    snapshot = request_data.to_snapshot()
    errors, _ = validate(snapshot, request_data.submit_attempt)
    return build_form_view(snapshot, errors, is_submitting=False, theme=theme)


@router.post(
    "/users",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": FormErrorResponse, "description": "Password not allowed"},
        422: {"model": FormErrorResponse, "description": "Form validation failed"},
        502: {"model": FormErrorResponse, "description": "Signup service refused"},
        503: {"model": FormErrorResponse, "description": "Signup service unreachable"},
    },
    summary="Create a user",
    description="Validate the form and submit it to the signup service.",
)
async def create_user(
    request_data: CreateUserRequest,
    signup_client: SignupClient = Depends(get_signup_client),
) -> CreateUserResponse | JSONResponse:
    """
    Create a user through the signup form.

    - **username**: 3-20 characters, letters, digits, "." or "_"
    - **password**: 10-24 characters with a digit, an upper and a lower case letter

    The form errors are returned with any failure.
    """
    form = CreateUserForm(signup_client)
    for field in FIELD_NAMES:
        value = getattr(request_data, field)
        if value is not None:
            form.on_change(field, value)

    if await form.on_submit():
        logger.info("User created: %s", form.snapshot.username)
        return CreateUserResponse(message="User created", username=form.snapshot.username)

    errors = FormErrorsModel.from_domain(form.errors)
    result = form.last_result
    if result is None:
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        detail = SUBMIT_BLOCKED
    else:
        # A client may fail without a reason; treat it as a service error.
        status_code = _FAILURE_STATUS.get(result.failure, status.HTTP_502_BAD_GATEWAY)
        detail = result.message or FAILURE_MESSAGES[SubmissionFailure.SERVER_ERROR]

    body = FormErrorResponse(detail=detail, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))
