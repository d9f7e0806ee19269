"""Validation pipeline.

Validators are declarative DRF serializers run against a request before
its handler. Failures come back as a complete list of field errors that
``to_error_list`` turns into domain errors.
"""

from collections.abc import Iterator
from dataclasses import asdict, dataclass
from typing import Any, Generic, Protocol, TypeVar

import structlog
from rest_framework import serializers
from rest_framework.settings import api_settings

from booking.domain import DomainError, Result

logger = structlog.get_logger(__name__)

TRequest = TypeVar("TRequest", contravariant=True)
TResponse = TypeVar("TResponse", covariant=True)


@dataclass(frozen=True)
class FieldError:
    """A single rule failure, addressed by field path (e.g. ``sections[0].items``)."""

    field: str
    message: str


class RequestHandler(Protocol[TRequest, TResponse]):
    def handle(self, request: TRequest) -> Result[TResponse]:
        ...


class Validator(Generic[TRequest]):
    """Runs a serializer's rules over a request dataclass.

    Subclasses set ``serializer_class``.
    """

    serializer_class: type[serializers.Serializer]

    def validate(self, request: TRequest) -> list[FieldError]:
        serializer = self.serializer_class(data=asdict(request))
        if serializer.is_valid():
            return []
        return list(flatten_errors(serializer.errors))


def flatten_errors(detail: Any, path: str = "") -> Iterator[FieldError]:
    """Walk a DRF error structure and yield one FieldError per message."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                child = path
            elif isinstance(key, int):
                child = f"{path}[{key}]"
            else:
                child = f"{path}.{key}" if path else str(key)
            yield from flatten_errors(value, child)
    elif isinstance(detail, list):
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                yield from flatten_errors(value, f"{path}[{index}]")
            else:
                yield FieldError(field=path, message=str(value))
    else:
        yield FieldError(field=path, message=str(detail))


def to_error_list(field_errors: list[FieldError]) -> list[DomainError]:
    return [DomainError.validation(error.field, error.message) for error in field_errors]


class ValidationBehavior(Generic[TRequest, TResponse]):
    """Runs ``validator`` and only calls ``handler`` when the request is valid."""

    def __init__(
        self,
        validator: Validator[TRequest],
        handler: RequestHandler[TRequest, TResponse],
    ) -> None:
        self._validator = validator
        self._handler = handler

    def handle(self, request: TRequest) -> Result[TResponse]:
        field_errors = self._validator.validate(request)
        if field_errors:
            logger.info(
                "validation_failed",
                request=type(request).__name__,
                fields=[error.field for error in field_errors],
            )
            return Result.from_errors(to_error_list(field_errors))
        return self._handler.handle(request)
