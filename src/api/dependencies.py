"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the sign up controller and its collaborators into routes.
"""

from fastapi import Depends, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserAccountRepository
from src.adapters.validators import EmailValidatorAdapter, PasswordValidatorAdapter
from src.api.controllers.signup import SignUpController
from src.config.settings import Settings, get_settings
from src.domain.create_user_account import DbCreateUserAccount

# Module-level singleton - EmailValidatorAdapter is stateless
_email_validator = EmailValidatorAdapter()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserAccountRepository(pool)


def get_email_validator() -> EmailValidatorAdapter:
    """Get email validator (singleton)."""
    return _email_validator


def get_password_validator(
    settings: Settings = Depends(get_settings),
) -> PasswordValidatorAdapter:
    return PasswordValidatorAdapter(min_length=settings.password_min_length)


def get_create_user_account(
    repository: PostgresUserAccountRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> DbCreateUserAccount:
    return DbCreateUserAccount(repository=repository, bcrypt_cost=settings.bcrypt_cost)


def get_signup_controller(
    email_validator: EmailValidatorAdapter = Depends(get_email_validator),
    password_validator: PasswordValidatorAdapter = Depends(get_password_validator),
    create_user_account: DbCreateUserAccount = Depends(get_create_user_account),
) -> SignUpController:
    """
    Create sign up controller with injected collaborators.

    Wires the validator adapters and the account creation use case.
    """
    return SignUpController(
        email_validator=email_validator,
        password_validator=password_validator,
        create_user_account=create_user_account,
    )
