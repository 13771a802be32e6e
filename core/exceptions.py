import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class CommissionTrackerError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(CommissionTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Invalid input"


class ForbiddenError(CommissionTrackerError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "Access denied"


class NotFoundError(CommissionTrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Resource not found"


class ConflictError(CommissionTrackerError):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"
    default_message = "Resource already exists"


class PersistenceError(CommissionTrackerError):
    """Storage write failed; nothing was persisted and the call is safe to retry."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "PERSISTENCE_ERROR"
    default_message = "Could not save changes, please retry"


def error_body(code, message, details=None):
    body = {"error": {"code": code, "message": message}}
    if details:
        body["error"]["details"] = details
    return body


_DRF_CODES = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def exception_handler(exc, context):
    """DRF exception handler that renders every error as a structured body."""
    if isinstance(exc, CommissionTrackerError):
        if exc.status_code >= 500:
            logger.error(f"{exc.code} in {context.get('view').__class__.__name__}: {exc.message}")
        return Response(error_body(exc.code, exc.message, exc.details), status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        details = exc.message_dict if hasattr(exc, "error_dict") else None
        message = "; ".join(exc.messages)
        return Response(
            error_body("VALIDATION_ERROR", message, details),
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, APIException):
        detail = exc.detail
        if isinstance(detail, (dict, list)):
            message = "Invalid input" if response.status_code == 400 else str(exc)
            details = detail
        else:
            message = str(detail)
            details = None
    elif isinstance(exc, Http404):
        message, details = "Resource not found", None
    else:
        message, details = str(exc), None

    code = _DRF_CODES.get(response.status_code, "ERROR")
    response.data = error_body(code, message, details)
    return response
