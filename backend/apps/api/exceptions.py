from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from django.core.exceptions import (
    PermissionDenied as DjangoPermissionDenied,
    ValidationError as DjangoValidationError,
)
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

STATUS_CODE_DEFAULTS: Dict[int, Tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("VALIDATION_ERROR", "Validation failed"),
    status.HTTP_401_UNAUTHORIZED: ("UNAUTHORIZED", "Authentication required"),
    status.HTTP_403_FORBIDDEN: (
        "FORBIDDEN",
        "You do not have permission to perform this action",
    ),
    status.HTTP_404_NOT_FOUND: ("NOT_FOUND", "Resource not found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", "Method not allowed"),
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: (
        "UNSUPPORTED_MEDIA_TYPE",
        "Unsupported media type",
    ),
    status.HTTP_500_INTERNAL_SERVER_ERROR: ("SERVER_ERROR", "Something went wrong"),
}


class ApplicationError(Exception):
    """
    Business-rule failure raised from services and rendered by the global handler.

    Subclasses pin `code`; the HTTP status is derived from it.

    Args:
        code: Machine readable error code.
        message: Human readable explanation of the error.
        details: Optional structured details for clients.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def to_response(self) -> Response:
        return error_response(self.code, self.message, self.details)


class DomainError(ApplicationError):
    """ApplicationError whose code is fixed by the subclass."""

    default_code = "BAD_REQUEST"

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(self.default_code, message, details=details)


class NotFoundError(DomainError):
    """A user, cart, product or cart item does not exist."""

    default_code = "NOT_FOUND"


class InsufficientStockError(DomainError):
    """Requested quantity exceeds the product's stock."""

    default_code = "INSUFFICIENT_STOCK"


class InvalidOwnershipError(DomainError):
    """A cart item belongs to another user's cart."""

    default_code = "INVALID_OWNERSHIP"


class InvalidCredentialsError(DomainError):
    default_code = "INVALID_CREDENTIALS"


class AccessDeniedError(DomainError):
    default_code = "FORBIDDEN"


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central exception handler for DRF views returning structured JSON errors.

    Business failures keep their 4xx mapping; anything unexpected (store
    outages, programming errors) collapses to a generic 500.
    """

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        bound_logger.info(
            "Handled application error",
            code=exc.code,
            detail=exc.message,
        )
        return exc.to_response()

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_normalize_django_validation_error(exc))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        "Something went wrong",
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    code, message, details = _normalize_payload(exc, response.data, status_code)
    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)
    return error_response(code, message, details, http_status=status_code)


def _normalize_django_validation_error(exc: DjangoValidationError):
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    if hasattr(exc, "messages"):
        return list(exc.messages)
    return {"detail": getattr(exc, "message", "Validation failed")}


def _normalize_payload(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, str, Optional[Any]]:
    if isinstance(exc, (ValidationError, ParseError)):
        fallback = "Validation failed" if isinstance(exc, ValidationError) else "Malformed request"
        return "VALIDATION_ERROR", _extract_message(payload, fallback, status_code), payload
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        fallback = (
            "Authentication failed"
            if isinstance(exc, AuthenticationFailed)
            else "Authentication required"
        )
        return "UNAUTHORIZED", _extract_message(payload, fallback, status_code), None
    if isinstance(exc, (PermissionDenied, DjangoPermissionDenied)):
        return (
            "FORBIDDEN",
            _extract_message(
                payload, "You do not have permission to perform this action", status_code
            ),
            None,
        )
    if isinstance(exc, (NotFound, Http404)):
        return "NOT_FOUND", _extract_message(payload, "Resource not found", status_code), None
    if isinstance(exc, MethodNotAllowed):
        return (
            "METHOD_NOT_ALLOWED",
            _extract_message(payload, "Method not allowed", status_code),
            None,
        )

    code, default_message = STATUS_CODE_DEFAULTS.get(
        status_code,
        (
            "SERVER_ERROR" if status_code >= 500 else "UNKNOWN_ERROR",
            "Something went wrong" if status_code >= 500 else "Request failed",
        ),
    )
    details = payload if status_code < 500 and isinstance(payload, (dict, list)) and payload else None
    return code, _extract_message(payload, default_message, status_code), details


def _extract_message(payload: Any, fallback: str, status_code: int) -> str:
    if status_code >= 500:
        return STATUS_CODE_DEFAULTS[status.HTTP_500_INTERNAL_SERVER_ERROR][1]
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return detail
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


__all__ = [
    "AccessDeniedError",
    "ApplicationError",
    "DomainError",
    "InsufficientStockError",
    "InvalidCredentialsError",
    "InvalidOwnershipError",
    "NotFoundError",
    "global_exception_handler",
]
