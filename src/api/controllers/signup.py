"""
Sign up controller - Validates a registration request and creates the account.

Checks run in a fixed order and stop at the first failure:

1. Required fields present: name, email, password, passwordConfirmation
2. Password accepted by the password validator
3. Confirmation matches the password
4. Email accepted by the email validator
5. Account created by the CreateUserAccount collaborator

Any exception raised along the way is turned into a 500 response by
server_error_boundary.
"""

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.api.http_helpers import bad_request, ok, server_error_boundary
from src.api.protocols import HttpRequest, HttpResponse
from src.domain.exceptions import InvalidFieldError, MissingFieldError, SignUpError
from src.domain.models import CreateUserAccountInput
from src.domain.ports import CreateUserAccount, EmailValidator, PasswordValidator

logger = logging.getLogger(__name__)

# Wire name -> attribute name, in check order
REQUIRED_FIELDS = {
    "name": "name",
    "email": "email",
    "password": "password",
    "passwordConfirmation": "password_confirmation",
}


@dataclass(frozen=True)
class SignUpRequest:
    """Typed view of a sign up request body. Unknown keys are dropped."""

    name: Any = None
    email: Any = None
    password: Any = None
    password_confirmation: Any = None

    @classmethod
    def from_body(cls, body: Mapping[str, Any] | None) -> "SignUpRequest":
        body = body or {}
        return cls(**{attr: body.get(wire) for wire, attr in REQUIRED_FIELDS.items()})

    def first_missing_field(self) -> str | None:
        """Return the wire name of the first absent or falsy field."""
        for wire, attr in REQUIRED_FIELDS.items():
            if not getattr(self, attr):
                return wire
        return None


class SignUpController:
    """
    Implements Controller for POST /signup.

    Collaborators are injected and only reached through their ports.
    """

    def __init__(
        self,
        email_validator: EmailValidator,
        password_validator: PasswordValidator,
        create_user_account: CreateUserAccount,
    ) -> None:
        self._email_validator = email_validator
        self._password_validator = password_validator
        self._create_user_account = create_user_account

    @server_error_boundary
    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        """
        Handle a sign up request.

        Returns:
            400 with MissingFieldError or InvalidFieldError on validation failure,
            200 with the created UserAccount on success,
            500 with ServerError if any collaborator raises.
        """
        request = SignUpRequest.from_body(http_request.body)

        error = self._validate(request)
        if error is not None:
            logger.info("Sign up rejected: %s", error)
            return bad_request(error)

        account = self._create_user_account.execute(
            CreateUserAccountInput(
                name=request.name,
                email=request.email,
                password=request.password,
            )
        )
        if inspect.isawaitable(account):
            account = await account
        return ok(account)

    def _validate(self, request: SignUpRequest) -> SignUpError | None:
        missing = request.first_missing_field()
        if missing is not None:
            return MissingFieldError(missing)

        if not self._password_validator.is_valid(request.password):
            return InvalidFieldError("password")

        if not self._password_validator.confirmation_is_matching(
            request.password, request.password_confirmation
        ):
            return InvalidFieldError("passwordConfirmation")

        if not self._email_validator.is_valid(request.email):
            return InvalidFieldError("email")

        return None
