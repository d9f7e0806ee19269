"""Domain errors for the booking module.

Expected business failures are ``DomainError`` values returned inside a
``Result``. Exceptions here signal programming faults only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Self


class ErrorKind(Enum):
    """Domain error categories."""

    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    UNEXPECTED = "UNEXPECTED"


@dataclass(frozen=True)
class DomainError:
    """Error value with a stable code and a user-safe description."""

    code: str
    description: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"

    @classmethod
    def conflict(cls, code: str, description: str) -> Self:
        return cls(code=code, description=description, kind=ErrorKind.CONFLICT)

    @classmethod
    def unauthorized(cls, code: str, description: str) -> Self:
        return cls(code=code, description=description, kind=ErrorKind.UNAUTHORIZED)

    @classmethod
    def not_found(cls, code: str, description: str) -> Self:
        return cls(code=code, description=description, kind=ErrorKind.NOT_FOUND)

    @classmethod
    def validation(cls, code: str, description: str) -> Self:
        return cls(code=code, description=description, kind=ErrorKind.VALIDATION)

    @classmethod
    def unexpected(cls, code: str, description: str) -> Self:
        return cls(code=code, description=description, kind=ErrorKind.UNEXPECTED)


class UserErrors:
    DUPLICATE_EMAIL = DomainError.conflict("User.DuplicateEmail", "Email is already in use.")


class AuthenticationErrors:
    # Same value for unknown email and wrong password.
    INVALID_CREDENTIALS = DomainError.unauthorized(
        "Auth.InvalidCredentials", "Invalid credentials."
    )


class MenuErrors:
    NOT_FOUND = DomainError.not_found("Menu.NotFound", "Menu not found.")


class InvalidIdFormatError(ValueError):
    """Raised when a raw value cannot be parsed into an identifier."""

    def __init__(self, id_type: str, value: Any) -> None:
        super().__init__(f"Invalid {id_type} format: {value!r}")
        self.id_type = id_type
        self.value = value


class InvariantViolationError(ValueError):
    """Raised when an aggregate factory is called with inconsistent parts."""
