"""Maps domain errors and unexpected failures to HTTP responses.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Internal error details
are logged, never returned to the client.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ticketing.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DAYS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_COUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DATA_INTEGRITY: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR = "INTERNAL_ERROR"


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=STATUS_BY_CODE[error.code],
    )


def domain_exception_handler(exc: Exception, context: dict) -> Response:
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else "unknown view"

    if isinstance(exc, DomainError):
        if STATUS_BY_CODE[exc.code] >= 500:
            logger.error("%s failed: %s", view_name, exc)
        return error_response(exc)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    logger.exception("Unhandled error in %s", view_name)
    return Response(
        {"code": INTERNAL_ERROR, "message": "An error occurred while processing the request"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
