"""
Domain exceptions - Error descriptors for sign up.

These errors are returned as response bodies rather than raised, so they
compare by type and arguments instead of by identity.
"""


class SignUpError(Exception):
    """Base class for sign up domain errors."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignUpError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class FieldError(SignUpError):
    """A named request field failed validation."""

    reason = "Invalid field"

    def __init__(self, field_name: str) -> None:
        super().__init__(field_name)
        self.field_name = field_name

    def __str__(self) -> str:
        return f"{self.reason}: {self.field_name}"


class MissingFieldError(FieldError):
    """Required field is absent or empty."""

    reason = "Missing field"


class InvalidFieldError(FieldError):
    """Field is present but rejected by a domain validator."""

    reason = "Invalid field"


class ServerError(SignUpError):
    """Opaque failure; the original cause is never attached."""

    def __str__(self) -> str:
        return "Internal server error"
