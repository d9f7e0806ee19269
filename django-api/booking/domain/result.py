"""Result-or-errors return type shared by every handler."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from booking.domain.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a success value or a non-empty, ordered tuple of errors.

    Attributes:
        value: Payload on success, None on failure.
        errors: Every error found, in the order they were detected.
    """

    value: T | None = None
    errors: tuple[DomainError, ...] = ()

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, *errors: DomainError) -> "Result[T]":
        if not errors:
            raise ValueError("A failed result needs at least one error")
        return cls(errors=tuple(errors))

    @classmethod
    def from_errors(cls, errors: Iterable[DomainError]) -> "Result[T]":
        return cls.failure(*errors)

    @property
    def is_error(self) -> bool:
        return bool(self.errors)

    @property
    def first_error(self) -> DomainError:
        if not self.errors:
            raise ValueError("Result has no errors")
        return self.errors[0]
