"""
API v1 routes.

Defines REST endpoints for signup and email verification:
- POST /v1/signup - Validate input, create the account, send the email
- GET /v1/signup/verify/{code} - Redeem a verification code
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_registration_service
from src.api.models import ErrorResponse, SignupRequest, SignupResponse, VerifyResponse
from src.domain.exceptions import (
    CreateUserFailure,
    EmailAlreadyExists,
    SendEmailError,
    UsernameAlreadyExists,
)
from src.domain.registration import RegistrationService
from src.domain.signup import UserSignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

GENERIC_FAILURE = "something went wrong"


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid username, password or email"},
        409: {"model": ErrorResponse, "description": "Email or username already exists"},
        500: {"model": ErrorResponse, "description": "Account or email delivery failure"},
    },
    summary="Sign up a new user",
    description="Submit username, email and password. "
    "A verification link will be sent to the provided email.",
)
async def signup(
    request_data: SignupRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> SignupResponse:
    """
    Sign up a new user and send the verification email.

    Validation stops at the first invalid field (username, then password,
    then email) and reports only that one.
    """
    validated = UserSignupRequest.try_create(
        request_data.username, request_data.password, request_data.email
    )
    if validated.is_err():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=validated.error)
    signup_request = validated.value

    result = await service.signup(signup_request)
    if result.is_ok():
        return SignupResponse(
            message="Verification email sent",
            user_id=result.value.value,
            username=signup_request.username.value,
        )

    error = result.error
    if isinstance(error, EmailAlreadyExists):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="email already exists")
    if isinstance(error, UsernameAlreadyExists):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="username already exists")
    if isinstance(error, CreateUserFailure):
        logger.error("Server error while creating user: %r", error.cause)
    elif isinstance(error, SendEmailError):
        logger.error("Error while sending signup email: %r", error.cause)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_FAILURE)


@router.get(
    "/signup/verify/{code}",
    response_model=VerifyResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown or already used code"},
        500: {"model": ErrorResponse, "description": "Verification lookup failed"},
    },
    summary="Verify email address",
    description="Redeem the verification code from the signup email. "
    "Each code can be redeemed once.",
)
async def verify(
    code: str,
    service: RegistrationService = Depends(get_registration_service),
) -> VerifyResponse:
    """Redeem a verification code and mark the account's email as verified."""
    result = await service.verify(code)
    if result.is_err():
        logger.error("Error while verifying email: %r", result.error)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error while verifying email",
        )
    if result.value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="invalid verification code"
        )
    return VerifyResponse(message="Email verified", username=result.value.value)
