"""JWT bearer authentication for DRF views."""

from dataclasses import dataclass, field
from typing import Any

from django.conf import settings
from rest_framework import authentication, exceptions
from rest_framework.request import Request

from booking.security import InvalidTokenError, JwtSettings, JwtTokenGenerator


@dataclass(frozen=True)
class TokenUser:
    """The caller identified by a verified token."""

    user_id: str
    first_name: str
    last_name: str
    claims: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def is_authenticated(self) -> bool:
        return True


class JwtAuthentication(authentication.BaseAuthentication):
    keyword = "Bearer"

    def __init__(self, tokens: JwtTokenGenerator | None = None) -> None:
        self._tokens = tokens or JwtTokenGenerator(
            JwtSettings.from_mapping(settings.JWT_SETTINGS)
        )

    def authenticate(self, request: Request) -> tuple[TokenUser, str] | None:
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed("Invalid authorization header.")

        try:
            token = header[1].decode()
        except UnicodeError as exc:
            raise exceptions.AuthenticationFailed("Invalid authorization header.") from exc
        try:
            claims = self._tokens.decode(token)
        except InvalidTokenError as exc:
            raise exceptions.AuthenticationFailed("Invalid or expired token.") from exc

        user = TokenUser(
            user_id=claims["sub"],
            first_name=claims.get("given_name", ""),
            last_name=claims.get("family_name", ""),
            claims=claims,
        )
        return user, token

    def authenticate_header(self, request: Request) -> str:
        return self.keyword
