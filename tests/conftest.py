"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid sign up request body
- The account returned by account creation stubs
"""

import pytest

from src.domain.models import UserAccount


@pytest.fixture
def signup_body() -> dict:
    """Request body with every required field present and matching."""
    return {
        "name": "name",
        "email": "email@example.com",
        "password": "password",
        "passwordConfirmation": "password",
    }


@pytest.fixture
def fake_account() -> UserAccount:
    """Account returned by account creation stubs."""
    return UserAccount(id="id", name="name", email="email@example.com", password="password")
