from django.apps import AppConfig
from django.conf import settings


class BookingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "booking"

    def ready(self) -> None:
        from booking_api.logging import configure_logging

        configure_logging(level=settings.LOG_LEVEL, log_json=settings.LOG_JSON)
