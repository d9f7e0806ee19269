"""Menu command and query handlers."""

from dataclasses import dataclass, field

import structlog

from booking.domain import (
    HostId,
    Menu,
    MenuErrors,
    MenuId,
    MenuItem,
    MenuSection,
    Result,
)
from booking.stores.interfaces import MenuStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MenuItemCommand:
    name: str
    description: str


@dataclass(frozen=True)
class MenuSectionCommand:
    name: str
    description: str
    items: list[MenuItemCommand] = field(default_factory=list)


@dataclass(frozen=True)
class CreateMenuCommand:
    name: str
    description: str
    host_id: str
    sections: list[MenuSectionCommand] = field(default_factory=list)


@dataclass(frozen=True)
class GetMenuQuery:
    host_id: str
    menu_id: str


class CreateMenuCommandHandler:
    """Builds a Menu from a validated command and stores it."""

    def __init__(self, menu_store: MenuStore) -> None:
        self._menu_store = menu_store

    def handle(self, command: CreateMenuCommand) -> Result[Menu]:
        menu = Menu.create(
            name=command.name,
            description=command.description,
            host_id=HostId.convert_from(command.host_id),
            sections=[
                MenuSection.create(
                    name=section.name,
                    description=section.description,
                    items=[
                        MenuItem.create(name=item.name, description=item.description)
                        for item in section.items
                    ],
                )
                for section in command.sections
            ],
        )
        self._menu_store.create(menu)
        logger.info(
            "menu_created",
            menu_id=str(menu.id),
            host_id=str(menu.host_id),
            sections=len(menu.sections),
        )
        return Result.success(menu)


class GetMenuQueryHandler:
    """Loads a host's menu by id."""

    def __init__(self, menu_store: MenuStore) -> None:
        self._menu_store = menu_store

    def handle(self, query: GetMenuQuery) -> Result[Menu]:
        menu = self._menu_store.get_menu(MenuId.create(query.menu_id))
        # A menu belonging to another host is reported as missing.
        if menu is None or menu.host_id != HostId.create(query.host_id):
            return Result.failure(MenuErrors.NOT_FOUND)
        return Result.success(menu)
