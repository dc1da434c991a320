"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.smtp.console import ConsoleEmailSender
from src.config.settings import get_settings
from src.domain.ports import UserRepository
from src.domain.registration import RegistrationService

_email_sender: ConsoleEmailSender | None = None


def get_repository(request: Request) -> UserRepository:
    """
    Get the repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_email_sender() -> ConsoleEmailSender:
    """Get console email sender (singleton)."""
    global _email_sender
    if _email_sender is None:
        settings = get_settings()
        _email_sender = ConsoleEmailSender(
            base_url=settings.verification_base_url,
            sender_address=settings.email_sender_address,
        )
    return _email_sender


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository and email sender for the domain service.
    """
    return RegistrationService(
        repository=get_repository(request),
        email_sender=get_email_sender(),
        bcrypt_rounds=get_settings().bcrypt_cost,
    )
