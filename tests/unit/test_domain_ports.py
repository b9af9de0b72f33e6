"""
Unit tests for domain ports, models and exceptions.

Tests verify:
- Port interfaces are properly defined
- Error descriptors compare by value and render their messages
- Models are immutable
- Domain purity (zero framework imports)
"""

import dataclasses
import subprocess

import pytest

from src.domain.exceptions import (
    FieldError,
    InvalidFieldError,
    MissingFieldError,
    ServerError,
    SignUpError,
)
from src.domain.models import CreateUserAccountInput, UserAccount
from src.domain.ports import (
    CreateUserAccount,
    EmailValidator,
    PasswordValidator,
    UserAccountRepository,
)


class TestPortInterfaces:
    """Tests for port Protocol definitions."""

    def test_email_validator_has_is_valid(self) -> None:
        """EmailValidator defines is_valid."""
        assert hasattr(EmailValidator, "is_valid")

    def test_password_validator_has_both_checks(self) -> None:
        """PasswordValidator defines is_valid and confirmation_is_matching."""
        assert hasattr(PasswordValidator, "is_valid")
        assert hasattr(PasswordValidator, "confirmation_is_matching")

    def test_create_user_account_has_execute(self) -> None:
        """CreateUserAccount defines execute."""
        assert hasattr(CreateUserAccount, "execute")

    def test_user_account_repository_has_add(self) -> None:
        """UserAccountRepository defines add."""
        assert hasattr(UserAccountRepository, "add")

    def test_structural_implementation_is_accepted(self) -> None:
        """A plain class with matching methods satisfies the port."""

        class StubCreator:
            def execute(self, account: CreateUserAccountInput) -> UserAccount:
                return UserAccount(id="1", name=account.name, email=account.email, password="x")

        def accepts_creator(creator: CreateUserAccount) -> UserAccount:
            return creator.execute(CreateUserAccountInput("n", "e@example.com", "p"))

        assert accepts_creator(StubCreator()).id == "1"


class TestDomainExceptions:
    """Tests for error descriptors."""

    def test_hierarchy(self) -> None:
        """All error descriptors share SignUpError."""
        assert issubclass(SignUpError, Exception)
        assert issubclass(MissingFieldError, FieldError)
        assert issubclass(InvalidFieldError, FieldError)
        assert issubclass(FieldError, SignUpError)
        assert issubclass(ServerError, SignUpError)

    def test_field_errors_compare_by_value(self) -> None:
        """Errors with the same type and field are equal."""
        assert MissingFieldError("name") == MissingFieldError("name")
        assert MissingFieldError("name") != MissingFieldError("email")

    def test_field_error_types_are_distinct(self) -> None:
        """Missing and invalid errors for the same field differ."""
        assert MissingFieldError("email") != InvalidFieldError("email")

    def test_server_errors_are_equal(self) -> None:
        """ServerError instances are interchangeable."""
        assert ServerError() == ServerError()

    def test_errors_are_hashable(self) -> None:
        """Equal errors hash alike."""
        assert len({MissingFieldError("name"), MissingFieldError("name")}) == 1

    def test_messages(self) -> None:
        """Errors render readable messages."""
        assert str(MissingFieldError("name")) == "Missing field: name"
        assert str(InvalidFieldError("passwordConfirmation")) == "Invalid field: passwordConfirmation"
        assert str(ServerError()) == "Internal server error"

    def test_field_name_attribute(self) -> None:
        """Field errors expose the failing field name."""
        assert InvalidFieldError("email").field_name == "email"

    def test_errors_can_be_raised(self) -> None:
        """Error descriptors remain raisable exceptions."""
        with pytest.raises(SignUpError):
            raise InvalidFieldError("password")


class TestDomainModels:
    """Tests for immutable value objects."""

    def test_user_account_is_frozen(self) -> None:
        """UserAccount cannot be modified once created."""
        account = UserAccount(id="id", name="name", email="email@example.com", password="hash")

        with pytest.raises(dataclasses.FrozenInstanceError):
            account.name = "other"  # type: ignore[misc]

    def test_create_input_has_no_confirmation(self) -> None:
        """CreateUserAccountInput carries only name, email and password."""
        fields = [f.name for f in dataclasses.fields(CreateUserAccountInput)]
        assert fields == ["name", "email", "password"]


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "from fastapi",
            "import fastapi",
            "from pydantic",
            "import pydantic",
            "from psycopg",
            "import psycopg",
        ],
    )
    def test_no_framework_imports_in_domain(self, pattern: str) -> None:
        """Domain layer has no framework imports."""
        result = subprocess.run(
            ["grep", "-r", pattern, "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"Framework import found: {result.stdout}"
