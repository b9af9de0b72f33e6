"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) the sign up flow requires.
Adapters and test doubles implement these protocols structurally.
"""

from collections.abc import Awaitable
from typing import Protocol

from .models import CreateUserAccountInput, UserAccount


class EmailValidator(Protocol):
    """Port interface for email format validation."""

    def is_valid(self, email: str) -> bool:
        """Return True if the email address is well formed."""
        ...


class PasswordValidator(Protocol):
    """Port interface for password rules."""

    def is_valid(self, password: str) -> bool:
        """Return True if the password satisfies the password policy."""
        ...

    def confirmation_is_matching(self, password: str, confirmation: str) -> bool:
        """
        Check the confirmation against the password.

        Args:
            password: Submitted password
            confirmation: Submitted password confirmation

        Returns:
            True if both values match
        """
        ...


class CreateUserAccount(Protocol):
    """Port interface for the account creation use case."""

    def execute(self, account: CreateUserAccountInput) -> UserAccount | Awaitable[UserAccount]:
        """
        Create and persist a user account.

        Implementations may be synchronous or return an awaitable.
        Any failure is signalled by raising.

        Args:
            account: Name, email and plaintext password

        Returns:
            The created UserAccount (or an awaitable resolving to it)
        """
        ...


class UserAccountRepository(Protocol):
    """Port interface for user account persistence."""

    def add(self, name: str, email: str, password_hash: str) -> UserAccount:
        """
        Store a new user account.

        Args:
            name: Display name
            email: Email address
            password_hash: bcrypt hashed password

        Returns:
            The stored account with its generated id
        """
        ...
