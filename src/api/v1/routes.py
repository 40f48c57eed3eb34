"""
API v1 routes.

Defines REST endpoints for registration and login. Both always answer
with the {status, message} envelope; the HTTP status code is derived
from the outcome kind.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_auth_service
from src.api.models import LoginRequest, OutcomeResponse, RegisterRequest
from src.domain.auth import AuthService
from src.domain.outcomes import Outcome, OutcomeKind
from src.domain.rules import REGISTRATION_RULES, REGISTRATION_WITH_CONFIRMATION_RULES

router = APIRouter(tags=["v1"])

_HTTP_STATUS = {
    OutcomeKind.REGISTERED: 201,
    OutcomeKind.LOGGED_IN: 200,
    OutcomeKind.INVALID_SUBMISSION: 422,
    OutcomeKind.DUPLICATE_IDENTITY: 409,
    OutcomeKind.INVALID_CREDENTIALS: 401,
    OutcomeKind.UNEXPECTED_FAILURE: 500,
}


def _respond(outcome: Outcome) -> JSONResponse:
    return JSONResponse(status_code=_HTTP_STATUS[outcome.kind], content=outcome.to_envelope())


@router.post(
    "/register",
    response_model=OutcomeResponse,
    status_code=201,
    responses={
        409: {"model": OutcomeResponse, "description": "Email or username already exists"},
        422: {"model": OutcomeResponse, "description": "Validation error"},
        500: {"model": OutcomeResponse, "description": "Unexpected failure"},
    },
    summary="Register a new account",
    description="Submit name, username, email, password and an optional role. "
    "Send confirmPassword to have it checked against password.",
)
def register(
    request_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """
    Register a new applicant or employer account.

    - **name**: 2-255 characters
    - **userName**: 3-255 letters, numbers, underscores or hyphens
    - **email**: Valid email address
    - **password**: 8+ characters with lowercase, uppercase and a digit
    - **role**: applicant (default) or employer
    """
    submission = request_data.to_submission()
    rules = REGISTRATION_WITH_CONFIRMATION_RULES if "confirmPassword" in submission else REGISTRATION_RULES
    return _respond(service.register(submission, rules))


@router.post(
    "/login",
    response_model=OutcomeResponse,
    responses={
        401: {"model": OutcomeResponse, "description": "Invalid email or password"},
        422: {"model": OutcomeResponse, "description": "Validation error"},
        500: {"model": OutcomeResponse, "description": "Unexpected failure"},
    },
    summary="Log in with email and password",
)
def login(
    request_data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """
    Check credentials.

    Unknown email, wrong password and unusable stored credentials all
    return the same 401 envelope.
    """
    return _respond(service.login(request_data.to_submission()))
