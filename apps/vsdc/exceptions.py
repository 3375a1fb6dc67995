"""
Project-wide DRF exception handler: every failure leaves in the VSDC envelope.

  ValidationError / ParseError         → 910, HTTP 400
  NotAuthenticated / AuthenticationFailed → 401
  NotFound                              → 995, HTTP 404
  other APIException                    → its own status, 999
  anything else                         → logged, 999, HTTP 500
"""

import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler as drf_exception_handler

from apps.vsdc import responses

logger = logging.getLogger("vsdc_gateway.errors")

NO_TOKEN = "No token provided"


def _flatten(detail):
    if isinstance(detail, dict):
        return "; ".join(f"{field}: {_flatten(msg)}" for field, msg in detail.items())
    if isinstance(detail, list):
        return ", ".join(_flatten(item) for item in detail)
    return str(detail)


def vsdc_exception_handler(exc, context):
    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "view")
        return responses.server_error(str(exc))

    if isinstance(exc, (exceptions.ValidationError, exceptions.ParseError)):
        body = responses.parameter_error(_flatten(exc.detail)).data
    elif isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        # no usable credentials at all reads as a missing token
        message = NO_TOKEN if isinstance(exc, exceptions.NotAuthenticated) else _flatten(exc.detail)
        body = {"resultCd": responses.UNAUTHORIZED, "resultMsg": message, "error": message}
    elif isinstance(exc, exceptions.NotFound):
        body = responses.not_found(_flatten(exc.detail)).data
    else:
        message = _flatten(exc.detail)
        body = {"resultCd": responses.SERVER_ERROR, "resultMsg": message, "error": message}

    response.data = body
    if response.status_code == status.HTTP_403_FORBIDDEN and isinstance(
        exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)
    ):
        response.status_code = status.HTTP_401_UNAUTHORIZED
    return response
