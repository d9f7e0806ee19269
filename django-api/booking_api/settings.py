"""Django settings for the booking API.

Every value can be overridden from the environment; the defaults are for
local development only.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in {"1", "true", "yes", "on"}


def _database_from_env() -> dict:
    url = os.environ.get("DATABASE_URL", "")
    if url.startswith("sqlite:///"):
        return {"ENGINE": "django.db.backends.sqlite3", "NAME": url.removeprefix("sqlite:///")}
    return {"ENGINE": "django.db.backends.sqlite3", "NAME": BASE_DIR / "db.sqlite3"}


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-insecure-secret-key")
DEBUG = _env_bool("DJANGO_DEBUG")
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "booking.apps.BookingConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "booking_api.urls"
WSGI_APPLICATION = "booking_api.wsgi.application"

DATABASES = {"default": _database_from_env()}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"
USE_I18N = True
LANGUAGE_CODE = "en-us"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": ["booking.handlers.authentication.JwtAuthentication"],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.IsAuthenticated"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "EXCEPTION_HANDLER": "booking.handlers.errors.problem_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

JWT_SETTINGS = {
    "SECRET": os.environ.get("JWT_SECRET", "dev-insecure-jwt-secret-change-me"),
    "ISSUER": os.environ.get("JWT_ISSUER", "dinner-booking"),
    "AUDIENCE": os.environ.get("JWT_AUDIENCE", "dinner-booking"),
    "EXPIRY_MINUTES": int(os.environ.get("JWT_EXPIRY_MINUTES", "60")),
    "ALGORITHM": "HS256",
}

# "django" persists through the ORM; "memory" keeps state in-process.
BOOKING_STORE = os.environ.get("BOOKING_STORE", "django")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_JSON = _env_bool("LOG_JSON")
