"""Cross-module API exceptions and the DRF exception handler.

Two error shapes are rendered by this project and never mixed:

- ``{"errors": [...]}`` for request validation failures (one entry per
  violated rule).
- ``{"error": "..."}`` for missing resources.

Everything else falls back to DRF's default rendering.  Non-API
exceptions are not handled here and propagate as 500.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class RequestValidationError(APIException):
    """One or more validation rules failed for the incoming request."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request."
    default_code = "invalid"

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__()
        self.errors = errors


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` producing the ``errors`` / ``error`` shapes."""
    if isinstance(exc, RequestValidationError):
        logger.info("request.validation_failed", error_count=len(exc.errors))
        return Response({"errors": exc.errors}, status=exc.status_code)

    if isinstance(exc, (Http404, NotFound)):
        detail = getattr(exc, "detail", None) or NotFound.default_detail
        return Response({"error": str(detail)}, status=status.HTTP_404_NOT_FOUND)

    return exception_handler(exc, context)
