"""
Registration domain service - Signup workflow and code redemption.

Signup Workflow
===============

    hash password -> issue verification code -> create user -> send email

Each step runs only if the previous one succeeded. Capabilities are
injected as async callables, so the workflow itself performs no I/O:

- create-user fails   -> Err(CreateUserError), email is never attempted
- send-email fails    -> Err(SendEmailError), the account already exists
- both succeed        -> Ok(UserId)

The create-succeeded/send-failed case leaves an unverified account behind
with no retry or cleanup. It is logged at WARNING and reported to the
caller as SendEmailError.

Verification Redemption
=======================

    presented code -> consume (atomic clear + mark verified) -> Username

A code that matches nothing, including a code that was already redeemed,
yields Ok(None). Only storage failures yield Err.
"""

import asyncio
import logging
from dataclasses import dataclass

from .exceptions import InvalidValue, UserSignupError
from .ports import (
    ConsumeVerificationCode,
    CreateUser,
    EmailSender,
    SendSignupEmail,
    UserRepository,
)
from .result import Err, Ok, Result
from .signup import CreateUserRequest, SignupEmailRequest, UserSignupRequest
from .values import DEFAULT_BCRYPT_ROUNDS, PasswordHash, UserId, Username, VerificationCode

logger = logging.getLogger(__name__)


async def signup_user(
    create_user: CreateUser,
    send_email: SendSignupEmail,
    request: UserSignupRequest,
    *,
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> Result[UserId, UserSignupError]:
    """
    Run the signup workflow for one validated request.

    Args:
        create_user: Persists the account, returns its UserId
        send_email: Delivers the verification email
        request: Validated signup intent
        bcrypt_rounds: Work factor for the password hash

    Returns:
        Ok(UserId) or Err(CreateUserError | SendEmailError)
    """
    # bcrypt is CPU-bound; keep it off the event loop
    password_hash = await asyncio.to_thread(
        PasswordHash.create, request.password, rounds=bcrypt_rounds
    )
    create_user_request = CreateUserRequest(
        username=request.username,
        password_hash=password_hash,
        email=request.email,
        verification_code=VerificationCode.create(),
    )

    created = await create_user(create_user_request)
    if created.is_err():
        logger.info(
            "Signup rejected for %s: %s", request.username, type(created.error).__name__
        )
        return created
    user_id = created.value

    sent = await send_email(
        SignupEmailRequest(
            username=create_user_request.username,
            email=create_user_request.email,
            verification_code=create_user_request.verification_code,
        )
    )
    if sent.is_err():
        logger.warning(
            "User %s (id=%s) created but verification email not sent: %r",
            request.username,
            user_id.value,
            sent.error.cause,
        )
        return sent

    logger.info("User %s signed up (id=%s)", request.username, user_id.value)
    return Ok(user_id)


async def verify_user(
    consume_code: ConsumeVerificationCode, code: str
) -> Result[Username | None, Exception]:
    """
    Redeem a verification code.

    Blank or malformed codes never reach storage. A stored username that
    no longer passes validation is reported as Err(InvalidValue).

    Returns:
        Ok(Username) when redeemed, Ok(None) when nothing matched,
        Err(cause) on storage failure
    """
    if not VerificationCode.is_well_formed(code):
        return Ok(None)

    consumed = await consume_code(code)
    if consumed.is_err():
        logger.error("Verification lookup failed: %r", consumed.error)
        return consumed
    if consumed.value is None:
        return Ok(None)

    # Stored names are already normalized; only the stored-form invariants apply
    try:
        username = Username(consumed.value)
    except InvalidValue as e:
        return Err(InvalidValue(f"stored username {consumed.value!r}: {e}"))

    logger.info("User %s verified email", username)
    return Ok(username)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Binds the repository and email sender adapters to the workflow
    functions so callers only pass request data.
    """

    repository: UserRepository
    email_sender: EmailSender
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS

    async def signup(self, request: UserSignupRequest) -> Result[UserId, UserSignupError]:
        return await signup_user(
            self.repository.create_user,
            self.email_sender.send_signup_email,
            request,
            bcrypt_rounds=self.bcrypt_rounds,
        )

    async def verify(self, code: str) -> Result[Username | None, Exception]:
        return await verify_user(self.repository.consume_verification_code, code)
