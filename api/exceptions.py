"""
API Exceptions - Error taxonomy for the SuperFix API

Every failure leaves the API in the same shape:
{
    "success": false,
    "message": "Human-readable message",
    "error_code": "MACHINE_READABLE_CODE",
    "errors": [...]
}

Validation and authorization errors are raised before any write.
NotificationError never reaches a client: the dispatcher logs and swallows it.
"""

import logging
from typing import Any, Dict

from django.db import DatabaseError
from django.utils.translation import gettext_lazy as _

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response

logger = logging.getLogger(__name__)


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class SuperfixAPIException(APIException):
    """
    Base exception for all SuperFix API errors.

    Attributes:
        status_code: HTTP status code
        default_detail: Default error message
        default_code: Machine-readable error code
        error_code: Specific error code for this instance
        extra_data: Additional data to include in response
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("An unexpected error occurred.")
    default_code = "ERROR"

    def __init__(self, detail: str = None, code: str = None, extra_data: Dict = None):
        self.error_code = code or self.default_code
        self.extra_data = extra_data or {}

        if detail is None:
            detail = str(self.default_detail)

        super().__init__(detail=detail, code=self.error_code)


# =============================================================================
# IDENTITY & ACCESS
# =============================================================================

class AuthenticationMissing(SuperfixAPIException):
    """Raised when a protected endpoint is called without a bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = _("Missing token.")
    default_code = "AUTHENTICATION_MISSING"


class InvalidCredentials(SuperfixAPIException):
    """Raised when a login attempt has a wrong username or password."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = _("Invalid credentials.")
    default_code = "INVALID_CREDENTIALS"


class AuthenticationInvalid(SuperfixAPIException):
    """Raised when a bearer token is malformed, badly signed or expired."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _("Invalid token.")
    default_code = "AUTHENTICATION_INVALID"


class AuthorizationDenied(SuperfixAPIException):
    """Raised when a valid token carries the wrong role."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _("Forbidden.")
    default_code = "AUTHORIZATION_DENIED"

    def __init__(self, required_role: str = None, **kwargs):
        extra_data = kwargs.pop('extra_data', {})
        if required_role:
            extra_data['required_role'] = required_role
        super().__init__(extra_data=extra_data, **kwargs)


# =============================================================================
# DOMAIN
# =============================================================================

class ConflictError(SuperfixAPIException):
    """Raised on a uniqueness violation (username, email, alias, slug)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _("A record with these details already exists.")
    default_code = "CONFLICT"

    def __init__(self, field_name: str = None, detail: str = None, **kwargs):
        extra_data = kwargs.pop('extra_data', {})
        if field_name:
            extra_data['field'] = field_name
            if detail is None:
                detail = f"The {field_name} is already taken."
        super().__init__(detail=detail, extra_data=extra_data, **kwargs)


class NotFoundError(SuperfixAPIException):
    """Raised when a referenced hero, mission or change request is absent."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _("The requested resource was not found.")
    default_code = "NOT_FOUND"

    def __init__(self, resource_type: str = None, resource_id: Any = None, **kwargs):
        detail = str(self.default_detail)
        extra_data = kwargs.pop('extra_data', {})

        if resource_type:
            extra_data['resource_type'] = resource_type
            detail = f"{resource_type} not found."

        super().__init__(detail=detail, extra_data=extra_data, **kwargs)


class PersistenceError(SuperfixAPIException):
    """Raised when the underlying store rejects a write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("The operation could not be saved.")
    default_code = "PERSISTENCE_ERROR"


class NotificationError(SuperfixAPIException):
    """Raised by the delivery task; logged by the dispatcher, never surfaced."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = _("Failed to send notification.")
    default_code = "NOTIFICATION_ERROR"


# =============================================================================
# EXCEPTION HANDLER
# =============================================================================

def _error_body(message: str, error_code: str, errors=None) -> Dict:
    return {
        "success": False,
        "message": message,
        "error_code": error_code,
        "errors": errors or [],
    }


def superfix_exception_handler(exc, context):
    """
    Custom exception handler for standardized error responses.

    Store failures are reported generically; anything unclassified is logged
    with its traceback and answered with a bare INTERNAL_ERROR.
    """
    # rest_framework.views loads the authentication classes, which import this module.
    from rest_framework.views import exception_handler

    if isinstance(exc, DatabaseError):
        logger.error(f"Persistence failure in {context.get('view').__class__.__name__}: {exc}")
        exc = PersistenceError()

    response = exception_handler(exc, context)

    if response is None:
        logger.exception(f"Unhandled exception: {exc}")
        return Response(
            _error_body("An unexpected error occurred.", "INTERNAL_ERROR"),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, SuperfixAPIException):
        error_data = _error_body(str(exc.detail), exc.error_code)
        if exc.extra_data:
            error_data["meta"] = exc.extra_data

    elif isinstance(exc, ValidationError):
        if isinstance(exc.detail, dict):
            errors = [
                {"field": field, "messages": [str(m) for m in msgs] if isinstance(msgs, list) else [str(msgs)]}
                for field, msgs in exc.detail.items()
            ]
            message = "Validation failed."
        elif isinstance(exc.detail, list):
            errors = [{"field": "non_field_errors", "messages": [str(e) for e in exc.detail]}]
            message = str(exc.detail[0]) if exc.detail else "Validation failed."
        else:
            errors = []
            message = str(exc.detail)
        error_data = _error_body(message, "VALIDATION_ERROR", errors)

    else:
        message = str(exc.detail) if hasattr(exc, 'detail') else str(exc)
        error_data = _error_body(message, str(getattr(exc, 'default_code', 'ERROR')).upper())

    response.data = error_data
    return response
