"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from booking.domain import UserId
from booking.services.interfaces import PasswordHasher, TokenGenerator
from booking.stores.memory_store import InMemoryMenuStore, InMemoryUserStore


class RecordingTokenGenerator(TokenGenerator):
    """Returns predictable tokens and remembers what it was asked to sign."""

    def __init__(self) -> None:
        self.calls: list[tuple[UserId, str, str]] = []

    def generate(self, user_id: UserId, first_name: str, last_name: str) -> str:
        self.calls.append((user_id, first_name, last_name))
        return f"token-{len(self.calls)}"


class PlainTextPasswordHasher(PasswordHasher):
    def hash(self, raw_password: str) -> str:
        return f"plain${raw_password}"

    def verify(self, raw_password: str, encoded: str) -> bool:
        return encoded == f"plain${raw_password}"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def fast_password_hashing(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def menu_store() -> InMemoryMenuStore:
    return InMemoryMenuStore()


@pytest.fixture
def token_generator() -> RecordingTokenGenerator:
    return RecordingTokenGenerator()


@pytest.fixture
def password_hasher() -> PlainTextPasswordHasher:
    return PlainTextPasswordHasher()
