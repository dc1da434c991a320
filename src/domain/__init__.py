"""
Domain layer - Pure business logic with zero framework imports.

This package contains the signup workflow and verification-code
redemption: validated value types, the fail-fast request assembler,
and the typed results the workflow returns. It defines its own port
interfaces for infrastructure abstraction.
"""

from .exceptions import (
    CreateUserError,
    CreateUserFailure,
    EmailAlreadyExists,
    InvalidValue,
    SendEmailError,
    UserSignupError,
    UsernameAlreadyExists,
)
from .ports import EmailSender, UserRepository
from .registration import RegistrationService, signup_user, verify_user
from .result import Err, Ok, Result, UnwrapError
from .signup import CreateUserRequest, SignupEmailRequest, UserSignupRequest
from .values import EmailAddress, Password, PasswordHash, UserId, Username, VerificationCode

__all__ = [
    "CreateUserError",
    "CreateUserFailure",
    "CreateUserRequest",
    "EmailAddress",
    "EmailAlreadyExists",
    "EmailSender",
    "Err",
    "InvalidValue",
    "Ok",
    "Password",
    "PasswordHash",
    "RegistrationService",
    "Result",
    "SendEmailError",
    "SignupEmailRequest",
    "UnwrapError",
    "UserId",
    "UserRepository",
    "UserSignupError",
    "UserSignupRequest",
    "Username",
    "UsernameAlreadyExists",
    "VerificationCode",
    "signup_user",
    "verify_user",
]
