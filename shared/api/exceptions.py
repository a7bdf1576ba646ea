"""Error envelope shared by every API endpoint.

All error responses carry the same body::

    {"message": "...", "statusCode": 404, "errors": {"field": "..."}}

``errors`` is present only when a field can be blamed. Views build
expected-outcome responses with :func:`error_response`; everything else
(serializer validation, authentication, permissions, database faults) is
normalised by :func:`envelope_exception_handler`, installed as DRF's
``EXCEPTION_HANDLER``.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog
from django.db import DatabaseError  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler, set_rollback  # type: ignore

logger = structlog.get_logger(__name__)

VALIDATION_ERROR = "Validation error"
AUTHENTICATION_REQUIRED = "Authentication required"
FORBIDDEN = "Forbidden"
INTERNAL_ERROR = "Internal server error"


def envelope(message: str, status_code: int, errors: Mapping[str, str] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"message": message, "statusCode": status_code}
    if errors:
        body["errors"] = dict(errors)
    return body


def error_response(message: str, status_code: int, errors: Mapping[str, str] | None = None) -> Response:
    return Response(envelope(message, status_code, errors), status=status_code)


def flatten_errors(detail: Any) -> dict[str, str]:
    """Reduce DRF error details to one message per field."""
    if isinstance(detail, Mapping):
        flat: dict[str, str] = {}
        for field, value in detail.items():
            while isinstance(value, (list, tuple)) and value:
                value = value[0]
            if isinstance(value, Mapping):
                nested = flatten_errors(value)
                value = next(iter(nested.values()), "")
            flat[str(field)] = str(value)
        return flat
    if isinstance(detail, (list, tuple)):
        return flatten_errors({"non_field_errors": detail}) if detail else {}
    return {"non_field_errors": str(detail)}


def envelope_exception_handler(exc, context):  # type: ignore
    """DRF exception handler producing the envelope body."""

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "request.infrastructure_fault",
            view=view.__class__.__name__ if view is not None else None,
            error=str(exc),
            exc_info=exc,
        )
        set_rollback()
        return error_response(INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        body = envelope(VALIDATION_ERROR, response.status_code, flatten_errors(exc.detail))
    elif isinstance(exc, exceptions.NotAuthenticated):
        body = envelope(AUTHENTICATION_REQUIRED, response.status_code)
    elif isinstance(exc, exceptions.AuthenticationFailed):
        # simplejwt's InvalidToken carries a dict detail
        detail = exc.detail.get("detail", exc.detail) if isinstance(exc.detail, Mapping) else exc.detail
        body = envelope(str(detail), response.status_code)
    elif isinstance(exc, exceptions.PermissionDenied):
        body = envelope(FORBIDDEN, response.status_code)
    elif isinstance(getattr(exc, "detail", None), (dict, list)):
        body = envelope(str(response.status_text), response.status_code, flatten_errors(exc.detail))
    else:
        body = envelope(str(getattr(exc, "detail", response.status_text)), response.status_code)

    response.data = body
    return response
