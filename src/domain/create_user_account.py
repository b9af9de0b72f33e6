"""
Account creation use case - Hashes the password and persists the account.
"""

from dataclasses import dataclass

import bcrypt

from .models import CreateUserAccountInput, UserAccount
from .ports import UserAccountRepository


@dataclass
class DbCreateUserAccount:
    """
    Implements CreateUserAccount over a UserAccountRepository.

    The returned account carries the stored hash, never the plaintext.
    Repository errors propagate to the caller.
    """

    repository: UserAccountRepository
    bcrypt_cost: int = 10

    def execute(self, account: CreateUserAccountInput) -> UserAccount:
        password_hash = self._hash_password(account.password)
        return self.repository.add(account.name, account.email, password_hash)

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt at the configured cost factor."""
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
