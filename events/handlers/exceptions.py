"""Maps domain errors to HTTP responses.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Only the error code and
the user-safe message leave the process.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
    VerificationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (VerificationError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        status_code = status_for(exc)
        view = context.get("view")
        logger.warning(
            "%s failed with %s",
            type(view).__name__ if view is not None else "request",
            exc,
        )
        return Response({"code": exc.code.value, "message": exc.message}, status=status_code)
    return exception_handler(exc, context)
