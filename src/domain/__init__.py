"""
Domain layer - Pure business logic with zero framework imports.

This package contains the sign up error descriptors, the value objects
exchanged with collaborators, and the port interfaces those collaborators
implement.
"""

from .create_user_account import DbCreateUserAccount
from .exceptions import FieldError, InvalidFieldError, MissingFieldError, ServerError, SignUpError
from .models import CreateUserAccountInput, UserAccount
from .ports import CreateUserAccount, EmailValidator, PasswordValidator, UserAccountRepository

__all__ = [
    "CreateUserAccount",
    "CreateUserAccountInput",
    "DbCreateUserAccount",
    "EmailValidator",
    "FieldError",
    "InvalidFieldError",
    "MissingFieldError",
    "PasswordValidator",
    "ServerError",
    "SignUpError",
    "UserAccount",
    "UserAccountRepository",
]
