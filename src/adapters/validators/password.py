"""
Password validator adapter - Implements PasswordValidator protocol.
"""

import secrets

# bcrypt only considers the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordValidatorAdapter:
    """
    Implements PasswordValidator protocol with a length policy.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, min_length: int = 8) -> None:
        self._min_length = min_length

    def is_valid(self, password: str) -> bool:
        """
        Check password length policy.

        Valid passwords are strings of at least min_length characters
        and at most 72 bytes once UTF-8 encoded.
        """
        if not isinstance(password, str):
            return False
        return len(password) >= self._min_length and len(password.encode()) <= BCRYPT_MAX_BYTES

    def confirmation_is_matching(self, password: str, confirmation: str) -> bool:
        """Compare password and confirmation in constant time."""
        if not isinstance(password, str) or not isinstance(confirmation, str):
            return False
        return secrets.compare_digest(password.encode(), confirmation.encode())
