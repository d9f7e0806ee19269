"""Token signing and password hashing backed by python-jose and Django."""

import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Self

from django.contrib.auth.hashers import check_password, make_password
from django.core.exceptions import ImproperlyConfigured
from jose import JWTError, jwt

from booking.domain import UserId
from booking.services.interfaces import PasswordHasher, TokenGenerator


class InvalidTokenError(ValueError):
    """Raised when a bearer token fails signature, audience or expiry checks."""


@dataclass(frozen=True)
class JwtSettings:
    secret: str
    issuer: str
    audience: str
    expiry_minutes: int = 60
    algorithm: str = "HS256"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build from the ``JWT_SETTINGS`` Django setting.

        Raises:
            ImproperlyConfigured: If no signing secret is configured.
        """
        secret = values.get("SECRET")
        if not secret:
            raise ImproperlyConfigured("JWT_SETTINGS['SECRET'] must be set")
        return cls(
            secret=secret,
            issuer=values.get("ISSUER", "dinner-booking"),
            audience=values.get("AUDIENCE", "dinner-booking"),
            expiry_minutes=int(values.get("EXPIRY_MINUTES", 60)),
            algorithm=values.get("ALGORITHM", "HS256"),
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenGenerator(TokenGenerator):
    """Issues and verifies HMAC-signed JWTs."""

    def __init__(
        self, settings: JwtSettings, now: Callable[[], datetime] = _utcnow
    ) -> None:
        self._settings = settings
        self._now = now

    def generate(self, user_id: UserId, first_name: str, last_name: str) -> str:
        claims = {
            "sub": str(user_id),
            "given_name": first_name,
            "family_name": last_name,
            "jti": str(uuid.uuid4()),
            "iss": self._settings.issuer,
            "aud": self._settings.audience,
            "exp": self._now() + timedelta(minutes=self._settings.expiry_minutes),
        }
        return jwt.encode(claims, self._settings.secret, algorithm=self._settings.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Return the verified claims of ``token``.

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired.
        """
        try:
            return jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                audience=self._settings.audience,
                issuer=self._settings.issuer,
            )
        except JWTError as exc:
            raise InvalidTokenError("Invalid token") from exc


class DjangoPasswordHasher(PasswordHasher):
    """Uses the hashers configured in ``PASSWORD_HASHERS``."""

    def hash(self, raw_password: str) -> str:
        return make_password(raw_password)

    def verify(self, raw_password: str, encoded: str) -> bool:
        return check_password(raw_password, encoded)
