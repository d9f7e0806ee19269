"""Registration and login handlers.

Handlers:
- Depend only on interfaces (stores, token generator, password hasher)
- Return a Result; expected failures are error values, never raised
- Let store and token-generator faults propagate

Emails are normalised (trimmed, domain lower-cased) before every lookup
and insert, so one address maps to one user.
"""

from dataclasses import dataclass

import structlog
from django.contrib.auth.base_user import BaseUserManager

from booking.domain import AuthenticationErrors, Result, User, UserErrors
from booking.services.interfaces import PasswordHasher, TokenGenerator
from booking.stores.interfaces import EmailAlreadyRegisteredError, UserStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RegisterCommand:
    first_name: str
    last_name: str
    email: str
    password: str


@dataclass(frozen=True)
class LoginQuery:
    email: str
    password: str


@dataclass(frozen=True)
class AuthenticationResult:
    """The authenticated user and the token issued for them."""

    user: User
    token: str


class RegisterCommandHandler:
    def __init__(
        self,
        user_store: UserStore,
        token_generator: TokenGenerator,
        password_hasher: PasswordHasher,
    ) -> None:
        self._user_store = user_store
        self._token_generator = token_generator
        self._password_hasher = password_hasher

    def handle(self, command: RegisterCommand) -> Result[AuthenticationResult]:
        email = BaseUserManager.normalize_email(command.email)
        if self._user_store.get_user_by_email(email) is not None:
            logger.info("registration_rejected", reason="duplicate_email")
            return Result.failure(UserErrors.DUPLICATE_EMAIL)

        user = User.create(
            first_name=command.first_name,
            last_name=command.last_name,
            email=email,
            password=self._password_hasher.hash(command.password),
        )
        try:
            self._user_store.add_user(user)
        except EmailAlreadyRegisteredError:
            # Lost a race with a concurrent registration for the same email.
            logger.info("registration_rejected", reason="duplicate_email_on_insert")
            return Result.failure(UserErrors.DUPLICATE_EMAIL)

        token = self._token_generator.generate(user.id, user.first_name, user.last_name)
        logger.info("user_registered", user_id=str(user.id))
        return Result.success(AuthenticationResult(user=user, token=token))


class LoginQueryHandler:
    def __init__(
        self,
        user_store: UserStore,
        token_generator: TokenGenerator,
        password_hasher: PasswordHasher,
    ) -> None:
        self._user_store = user_store
        self._token_generator = token_generator
        self._password_hasher = password_hasher

    def handle(self, query: LoginQuery) -> Result[AuthenticationResult]:
        user = self._user_store.get_user_by_email(BaseUserManager.normalize_email(query.email))
        if user is None:
            logger.info("login_rejected", reason="unknown_email")
            return Result.failure(AuthenticationErrors.INVALID_CREDENTIALS)

        if not self._password_hasher.verify(query.password, user.password):
            logger.info("login_rejected", reason="wrong_password", user_id=str(user.id))
            return Result.failure(AuthenticationErrors.INVALID_CREDENTIALS)

        token = self._token_generator.generate(user.id, user.first_name, user.last_name)
        logger.info("user_logged_in", user_id=str(user.id))
        return Result.success(AuthenticationResult(user=user, token=token))
