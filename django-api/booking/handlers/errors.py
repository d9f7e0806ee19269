"""Mapping of domain errors and unhandled faults to HTTP problem responses."""

import structlog
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from booking.domain import DomainError, ErrorKind
from booking.services.validation import flatten_errors, to_error_list

logger = structlog.get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
}


def problem(errors: tuple[DomainError, ...]) -> Response:
    """Render a non-empty error list as a problem response.

    When every error is a validation error, all of them are returned keyed
    by field path. Otherwise the first error decides the status.
    """
    if all(error.kind is ErrorKind.VALIDATION for error in errors):
        field_errors: dict[str, list[str]] = {}
        for error in errors:
            field_errors.setdefault(error.code, []).append(error.description)
        return Response(
            {
                "title": "One or more validation errors occurred.",
                "status": status.HTTP_400_BAD_REQUEST,
                "errors": field_errors,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    first = errors[0]
    status_code = STATUS_BY_KIND.get(first.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(
        {
            "title": first.description,
            "status": status_code,
            "errors": [error.code for error in errors],
        },
        status=status_code,
    )


def problem_exception_handler(exc: Exception, context: dict) -> Response:
    """DRF exception handler that never exposes internal error details.

    Request-shape failures get the same problem body as validation errors.
    """
    if isinstance(exc, exceptions.ValidationError):
        return problem(tuple(to_error_list(list(flatten_errors(exc.detail)))))

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
    )
    return Response(
        {
            "title": "An unexpected error occurred.",
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
