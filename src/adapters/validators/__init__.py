"""Validator adapters - Concrete email and password rules."""

from .email import EmailValidatorAdapter
from .password import PasswordValidatorAdapter

__all__ = ["EmailValidatorAdapter", "PasswordValidatorAdapter"]
