"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging the rendered signup email for demo purposes.
"""

import logging
from dataclasses import dataclass

from src.domain.exceptions import SendEmailError
from src.domain.result import Err, Ok, Result
from src.domain.signup import SignupEmailRequest

logger = logging.getLogger(__name__)

SIGNUP_EMAIL_SUBJECT = "Verify your email address"
DEFAULT_SENDER_ADDRESS = "no-reply@localhost"


@dataclass(frozen=True)
class SignupEmail:
    """Rendered signup email, ready for a transport."""

    from_: str
    to: str
    subject: str
    body: str
    verification_url: str


def render_signup_email(
    request: SignupEmailRequest,
    base_url: str,
    sender_address: str = DEFAULT_SENDER_ADDRESS,
) -> SignupEmail:
    """
    Render the verification email for a new user.

    Args:
        request: Username, address and verification code
        base_url: Public origin of the service, e.g. https://example.com
        sender_address: From address of the message

    Returns:
        SignupEmail whose body links to /v1/signup/verify/<code>
    """
    verification_url = f"{base_url.rstrip('/')}/v1/signup/verify/{request.verification_code.value}"
    body = (
        f"Hi {request.username.value},\n\n"
        f"Confirm your email address by opening the link below:\n\n"
        f"{verification_url}\n\n"
        f"If you did not sign up, you can ignore this message.\n"
    )
    return SignupEmail(
        from_=sender_address,
        to=request.email.value,
        subject=SIGNUP_EMAIL_SUBJECT,
        body=body,
        verification_url=verification_url,
    )


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - logs the verification link.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        sender_address: str = DEFAULT_SENDER_ADDRESS,
    ) -> None:
        self._base_url = base_url
        self._sender_address = sender_address

    async def send_signup_email(self, request: SignupEmailRequest) -> Result[None, SendEmailError]:
        """
        Log the signup email (simulates email delivery).

        In production, this would be replaced with an SMTP adapter.
        The link is logged at INFO level to be visible in docker-compose logs.

        Args:
            request: Recipient, username and verification code

        Returns:
            Ok(None), or Err(SendEmailError) if rendering/delivery failed
        """
        try:
            email = render_signup_email(request, self._base_url, self._sender_address)
            logger.info(
                "[VERIFICATION] From: %s Username: %s Email: %s Link: %s",
                email.from_,
                request.username.value,
                email.to,
                email.verification_url,
            )
        except Exception as e:
            return Err(SendEmailError(e))
        return Ok(None)
