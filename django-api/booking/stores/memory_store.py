"""In-process stores for development and tests."""

from booking.domain import Menu, MenuId, User
from booking.stores.interfaces import EmailAlreadyRegisteredError, MenuStore, UserStore


class InMemoryUserStore(UserStore):
    """List-backed user store."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def get_user_by_email(self, email: str) -> User | None:
        return next((user for user in self._users if user.email == email), None)

    def add_user(self, user: User) -> None:
        if self.get_user_by_email(user.email) is not None:
            raise EmailAlreadyRegisteredError(user.email)
        self._users.append(user)


class InMemoryMenuStore(MenuStore):
    """Dict-backed menu store keyed by MenuId."""

    def __init__(self) -> None:
        self._menus: dict[MenuId, Menu] = {}

    def create(self, menu: Menu) -> None:
        self._menus[menu.id] = menu

    def get_menu(self, menu_id: MenuId) -> Menu | None:
        return self._menus.get(menu_id)
