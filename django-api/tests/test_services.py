"""Unit tests for the command and query handlers.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import pytest

from booking.domain import (
    AuthenticationErrors,
    ErrorKind,
    HostId,
    Menu,
    MenuErrors,
    UserErrors,
)
from booking.services.authentication import (
    LoginQuery,
    LoginQueryHandler,
    RegisterCommand,
    RegisterCommandHandler,
)
from booking.services.menus import (
    CreateMenuCommand,
    CreateMenuCommandHandler,
    GetMenuQuery,
    GetMenuQueryHandler,
    MenuItemCommand,
    MenuSectionCommand,
)
from booking.services.validation import ValidationBehavior
from booking.services.validators import (
    CreateMenuCommandValidator,
    GetMenuQueryValidator,
    LoginQueryValidator,
    RegisterCommandValidator,
)
from booking.stores.interfaces import EmailAlreadyRegisteredError

HOST_ID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"


@pytest.fixture
def register(user_store, token_generator, password_hasher):
    return ValidationBehavior(
        RegisterCommandValidator(),
        RegisterCommandHandler(user_store, token_generator, password_hasher),
    )


@pytest.fixture
def login(user_store, token_generator, password_hasher):
    return ValidationBehavior(
        LoginQueryValidator(),
        LoginQueryHandler(user_store, token_generator, password_hasher),
    )


@pytest.fixture
def create_menu(menu_store):
    return ValidationBehavior(CreateMenuCommandValidator(), CreateMenuCommandHandler(menu_store))


@pytest.fixture
def get_menu(menu_store):
    return ValidationBehavior(GetMenuQueryValidator(), GetMenuQueryHandler(menu_store))


def ada(email: str = "ada@example.com", password: str = "s3cret") -> RegisterCommand:
    return RegisterCommand(first_name="Ada", last_name="Lovelace", email=email, password=password)


def menu_command(**overrides) -> CreateMenuCommand:
    params = {
        "name": "Tasting menu",
        "description": "Seven courses",
        "host_id": HOST_ID,
        "sections": [
            MenuSectionCommand(
                name="Starters",
                description="Small plates",
                items=[MenuItemCommand(name="Soup", description="Leek and potato")],
            )
        ],
    }
    params.update(overrides)
    return CreateMenuCommand(**params)


class TestRegister:
    """Tests for RegisterCommandHandler."""

    def test_register_returns_user_and_token(self, register, token_generator, user_store):
        result = register.handle(ada())

        assert not result.is_error
        user = result.value.user
        assert result.value.token == "token-1"
        assert token_generator.calls == [(user.id, "Ada", "Lovelace")]
        assert user_store.get_user_by_email("ada@example.com") == user

    def test_password_is_hashed_before_storing(self, register, user_store):
        register.handle(ada(password="s3cret"))
        assert user_store.get_user_by_email("ada@example.com").password == "plain$s3cret"

    def test_duplicate_email_is_a_conflict(self, register, token_generator, user_store):
        first = register.handle(ada())
        second = register.handle(ada(password="other"))

        assert second.is_error
        assert second.errors == (UserErrors.DUPLICATE_EMAIL,)
        assert second.first_error.kind is ErrorKind.CONFLICT
        assert user_store.get_user_by_email("ada@example.com") == first.value.user
        assert len(token_generator.calls) == 1

    def test_email_is_normalised_before_duplicate_check(self, register, user_store):
        first = register.handle(ada(email=" ada@EXAMPLE.com "))
        second = register.handle(ada())

        assert first.value.user.email == "ada@example.com"
        assert second.errors == (UserErrors.DUPLICATE_EMAIL,)
        assert user_store.get_user_by_email("ada@example.com") == first.value.user

    def test_store_level_duplicate_is_a_conflict(self, token_generator, password_hasher):
        """A unique-index violation on insert maps to the same conflict."""

        class RacingStore:
            def get_user_by_email(self, email):
                return None

            def add_user(self, user):
                raise EmailAlreadyRegisteredError(user.email)

        handler = RegisterCommandHandler(RacingStore(), token_generator, password_hasher)
        result = handler.handle(ada())

        assert result.errors == (UserErrors.DUPLICATE_EMAIL,)
        assert token_generator.calls == []

    def test_invalid_request_returns_all_field_errors(self, register, token_generator):
        result = register.handle(
            RegisterCommand(first_name="", last_name="", email="nope", password="")
        )

        assert result.is_error
        assert all(error.kind is ErrorKind.VALIDATION for error in result.errors)
        assert {error.code for error in result.errors} == {
            "first_name",
            "last_name",
            "email",
            "password",
        }
        assert token_generator.calls == []

    def test_store_failure_propagates(self, token_generator, password_hasher):
        class BrokenStore:
            def get_user_by_email(self, email):
                raise ConnectionError("database unavailable")

        handler = RegisterCommandHandler(BrokenStore(), token_generator, password_hasher)
        with pytest.raises(ConnectionError):
            handler.handle(ada())


class TestLogin:
    """Tests for LoginQueryHandler."""

    def test_login_returns_token_for_stored_user(self, register, login, token_generator):
        registered = register.handle(ada()).value.user

        result = login.handle(LoginQuery(email="ada@example.com", password="s3cret"))

        assert not result.is_error
        assert result.value.user == registered
        assert result.value.token == "token-2"
        assert token_generator.calls[-1] == (registered.id, "Ada", "Lovelace")

    def test_wrong_password_and_unknown_email_are_indistinguishable(
        self, register, login, token_generator
    ):
        register.handle(ada())

        wrong_password = login.handle(LoginQuery(email="ada@example.com", password="wrong"))
        unknown_email = login.handle(LoginQuery(email="bob@example.com", password="s3cret"))

        assert wrong_password.errors == (AuthenticationErrors.INVALID_CREDENTIALS,)
        assert unknown_email.errors == wrong_password.errors
        assert wrong_password.first_error.kind is ErrorKind.UNAUTHORIZED
        assert len(token_generator.calls) == 1

    def test_login_normalises_email(self, register, login):
        registered = register.handle(ada()).value.user

        result = login.handle(LoginQuery(email=" ada@Example.COM ", password="s3cret"))

        assert result.value.user == registered

    def test_blank_credentials_fail_validation(self, login):
        result = login.handle(LoginQuery(email="", password=""))
        assert {error.code for error in result.errors} == {"email", "password"}


class TestCreateMenu:
    """Tests for CreateMenuCommandHandler."""

    def test_creates_and_stores_menu(self, create_menu, menu_store):
        result = create_menu.handle(menu_command())

        assert not result.is_error
        menu = result.value
        assert isinstance(menu, Menu)
        assert menu.host_id == HostId.create(HOST_ID)
        assert menu.sections[0].id is not None
        assert menu.sections[0].items[0].name == "Soup"
        assert menu.average_rating.reported is None
        assert menu_store.get_menu(menu.id) is menu

    def test_each_call_creates_a_new_menu(self, create_menu):
        first = create_menu.handle(menu_command()).value
        second = create_menu.handle(menu_command()).value
        assert first.id != second.id

    def test_empty_sections_fail_validation(self, create_menu, menu_store):
        result = create_menu.handle(menu_command(sections=[]))

        assert result.is_error
        assert result.first_error.code == "sections"
        assert "Sections" in result.first_error.description
        assert menu_store._menus == {}

    def test_section_without_items_fails_validation(self, create_menu):
        sections = [
            MenuSectionCommand("Starters", "Small plates", [MenuItemCommand("Soup", "Leek")]),
            MenuSectionCommand("Mains", "Large plates", []),
        ]
        result = create_menu.handle(menu_command(sections=sections))

        assert result.is_error
        assert [error.code for error in result.errors] == ["sections[1].items"]
        assert result.first_error.description == "Sections must contain at least one item."

    def test_reports_every_violation_at_once(self, create_menu):
        result = create_menu.handle(
            menu_command(name="", description="x" * 501, host_id="not-a-uuid", sections=[])
        )

        codes = {error.code for error in result.errors}
        assert codes == {"name", "description", "host_id", "sections"}

    def test_name_too_long(self, create_menu):
        result = create_menu.handle(menu_command(name="x" * 101))
        assert result.errors[0].description == "Name must not exceed 100 characters."


class TestGetMenu:
    """Tests for GetMenuQueryHandler."""

    def test_returns_stored_menu(self, create_menu, get_menu):
        menu = create_menu.handle(menu_command()).value

        result = get_menu.handle(GetMenuQuery(host_id=HOST_ID, menu_id=str(menu.id)))

        assert result.value is menu

    def test_unknown_menu_is_not_found(self, get_menu):
        result = get_menu.handle(
            GetMenuQuery(host_id=HOST_ID, menu_id="11111111-2222-3333-4444-555555555555")
        )
        assert result.errors == (MenuErrors.NOT_FOUND,)

    def test_menu_of_another_host_is_not_found(self, create_menu, get_menu):
        menu = create_menu.handle(menu_command()).value
        other_host = "99999999-2222-3333-4444-555555555555"

        result = get_menu.handle(GetMenuQuery(host_id=other_host, menu_id=str(menu.id)))

        assert result.first_error.kind is ErrorKind.NOT_FOUND

    def test_malformed_menu_id_fails_validation(self, get_menu):
        result = get_menu.handle(GetMenuQuery(host_id=HOST_ID, menu_id="abc"))
        assert result.first_error.kind is ErrorKind.VALIDATION
        assert result.first_error.code == "menu_id"
