"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Validated signup requests
- Stub capabilities for the signup workflow
- The in-memory repository
"""

from unittest.mock import AsyncMock

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.result import Ok
from src.domain.signup import UserSignupRequest
from src.domain.values import UserId


@pytest.fixture
def signup_request() -> UserSignupRequest:
    """A valid signup request for user 'alice'."""
    return UserSignupRequest.try_create("Alice", "s3cret!", "Alice@Example.com").unwrap()


@pytest.fixture
def create_user_ok() -> AsyncMock:
    """create-user stub that always assigns UserId(1)."""
    return AsyncMock(return_value=Ok(UserId(1)))


@pytest.fixture
def send_email_ok() -> AsyncMock:
    """send-email stub that always succeeds."""
    return AsyncMock(return_value=Ok(None))


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryUserRepository()
