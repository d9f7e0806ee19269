"""Collaborator interfaces consumed by the handlers."""

from abc import ABC, abstractmethod

from booking.domain import UserId


class TokenGenerator(ABC):
    """Issues signed bearer tokens."""

    @abstractmethod
    def generate(self, user_id: UserId, first_name: str, last_name: str) -> str:
        """Return an opaque, signed, time-limited token for the user."""
        ...


class PasswordHasher(ABC):
    """One-way password hashing."""

    @abstractmethod
    def hash(self, raw_password: str) -> str:
        ...

    @abstractmethod
    def verify(self, raw_password: str, encoded: str) -> bool:
        ...
