"""
Email validator adapter - Implements EmailValidator protocol.

Delegates format checks to pydantic's EmailStr, which wraps the
email-validator package without deliverability (DNS) checks.
"""

from pydantic import EmailStr, TypeAdapter, ValidationError

_email_adapter = TypeAdapter(EmailStr)


class EmailValidatorAdapter:
    """
    Implements EmailValidator protocol via pydantic.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def is_valid(self, email: str) -> bool:
        try:
            _email_adapter.validate_python(email)
        except ValidationError:
            return False
        return True
