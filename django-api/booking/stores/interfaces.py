"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from booking.domain import Menu, MenuId, User


class EmailAlreadyRegisteredError(Exception):
    """Raised by a store that enforces email uniqueness on insert."""

    def __init__(self, email: str) -> None:
        super().__init__("Email is already registered")
        self.email = email


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Return the user with this email, or None if not found."""
        ...

    @abstractmethod
    def add_user(self, user: User) -> None:
        """Persist a new user.

        Raises:
            EmailAlreadyRegisteredError: If the storage already holds the email.
        """
        ...


class MenuStore(ABC):
    """Interface for menu persistence operations."""

    @abstractmethod
    def create(self, menu: Menu) -> None:
        """Persist a new menu together with its sections and items."""
        ...

    @abstractmethod
    def get_menu(self, menu_id: MenuId) -> Menu | None:
        """Return a menu by ID, or None if not found."""
        ...
