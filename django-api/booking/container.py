"""Explicit construction of handlers and their collaborators.

Built once at URLconf import; views receive their handler through
``as_view(handler=...)``.
"""

from dataclasses import dataclass
from typing import Any

import structlog
from django.conf import settings as django_settings
from django.core.exceptions import ImproperlyConfigured

from booking.security import DjangoPasswordHasher, JwtSettings, JwtTokenGenerator
from booking.services.authentication import LoginQueryHandler, RegisterCommandHandler
from booking.services.interfaces import PasswordHasher
from booking.services.menus import CreateMenuCommandHandler, GetMenuQueryHandler
from booking.services.validation import ValidationBehavior
from booking.services.validators import (
    CreateMenuCommandValidator,
    GetMenuQueryValidator,
    LoginQueryValidator,
    RegisterCommandValidator,
)
from booking.stores.django_store import DjangoMenuStore, DjangoUserStore
from booking.stores.interfaces import MenuStore, UserStore
from booking.stores.memory_store import InMemoryMenuStore, InMemoryUserStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Container:
    register: ValidationBehavior
    login: ValidationBehavior
    create_menu: ValidationBehavior
    get_menu: ValidationBehavior


def build_stores(backend: str) -> tuple[UserStore, MenuStore]:
    if backend == "django":
        return DjangoUserStore(), DjangoMenuStore()
    if backend == "memory":
        return InMemoryUserStore(), InMemoryMenuStore()
    raise ImproperlyConfigured(f"Unknown BOOKING_STORE backend: {backend!r}")


def build_container(
    settings: Any = django_settings,
    *,
    user_store: UserStore | None = None,
    menu_store: MenuStore | None = None,
    password_hasher: PasswordHasher | None = None,
) -> Container:
    """Wire every handler from Django settings.

    Stores and the password hasher may be passed in to override the
    configured ones.
    """
    if user_store is None or menu_store is None:
        default_users, default_menus = build_stores(getattr(settings, "BOOKING_STORE", "django"))
        user_store = user_store or default_users
        menu_store = menu_store or default_menus
    password_hasher = password_hasher or DjangoPasswordHasher()
    token_generator = JwtTokenGenerator(JwtSettings.from_mapping(settings.JWT_SETTINGS))

    logger.debug(
        "container_built",
        user_store=type(user_store).__name__,
        menu_store=type(menu_store).__name__,
    )
    return Container(
        register=ValidationBehavior(
            RegisterCommandValidator(),
            RegisterCommandHandler(user_store, token_generator, password_hasher),
        ),
        login=ValidationBehavior(
            LoginQueryValidator(),
            LoginQueryHandler(user_store, token_generator, password_hasher),
        ),
        create_menu=ValidationBehavior(
            CreateMenuCommandValidator(),
            CreateMenuCommandHandler(menu_store),
        ),
        get_menu=ValidationBehavior(
            GetMenuQueryValidator(),
            GetMenuQueryHandler(menu_store),
        ),
    )
