"""
API-wide error responses.

Every error leaving a view goes through ``api_exception_handler`` so the
client always gets ``{"success": false, ...}``. Validation failures carry a
flat list of ``{"path", "message"}`` entries; anything unexpected becomes a
generic 500 and is logged with its traceback.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


def flatten_errors(detail, path=""):
    """Yield ``{"path", "message"}`` dicts for a DRF error detail tree."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                child_path = path
            else:
                child_path = f"{path}.{key}" if path else str(key)
            yield from flatten_errors(value, child_path)
    elif isinstance(detail, list):
        for index, item in enumerate(detail):
            if isinstance(item, (dict, list)):
                child_path = f"{path}.{index}" if path else str(index)
                yield from flatten_errors(item, child_path)
            else:
                yield {"path": path, "message": str(item)}
    else:
        yield {"path": path, "message": str(detail)}


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
        set_rollback()
        return Response(
            {"success": False, "error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {
            "success": False,
            "message": "Validation failed",
            "errors": list(flatten_errors(exc.detail)),
        }
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {"success": False, "error": str(detail or response.data)}
    return response
