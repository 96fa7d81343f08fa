import logging

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError as DjangoValidationError
from django.db import InterfaceError, OperationalError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class StoreUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "The data store is temporarily unavailable."
    default_code = "store_unavailable"


class NoCurrentSite(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "No site is bound to this host."
    default_code = "no_current_site"


def as_drf_exception(exc):
    if isinstance(exc, (OperationalError, InterfaceError)):
        logger.error("Data store failure: %s", exc, exc_info=exc)
        return StoreUnavailable()
    if isinstance(exc, DjangoValidationError):
        if not hasattr(exc, "error_dict"):
            return ValidationError({api_settings.NON_FIELD_ERRORS_KEY: exc.messages})
        return ValidationError(
            {
                api_settings.NON_FIELD_ERRORS_KEY if field == NON_FIELD_ERRORS else field: messages
                for field, messages in exc.message_dict.items()
            }
        )
    return exc


def qaday_exception_handler(exc, context):
    exc = as_drf_exception(exc)
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {
            "code": "validation_error",
            "detail": "Request validation failed.",
            "field_errors": response.data,
        }
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
    code = getattr(exc, "default_code", "api_error")

    if isinstance(exc, (StoreUnavailable, NoCurrentSite)):
        code = exc.default_code
    elif response.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        code = "internal_error"
    elif response.status_code == status.HTTP_401_UNAUTHORIZED:
        code = "authentication_failed"
    elif response.status_code == status.HTTP_403_FORBIDDEN:
        code = "permission_denied"
    elif response.status_code == status.HTTP_404_NOT_FOUND:
        code = "not_found"

    response.data = {
        "code": code,
        "detail": str(detail),
        "field_errors": {},
    }
    return response
