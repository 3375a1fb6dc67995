"""VSDC result envelope helpers."""

from datetime import timezone as dt_timezone

from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response

SUCCESS           = "000"
UNAUTHORIZED      = "401"
PARAMETER_ERROR   = "910"
NOT_FOUND         = "995"
SERVER_ERROR      = "999"

SUCCESS_MSG = "It is succeeded"


def result_dt(now=None) -> str:
    """yyyyMMddHHmmss in UTC."""
    now = now or timezone.now()
    return now.astimezone(dt_timezone.utc).strftime("%Y%m%d%H%M%S")


def vsdc_success(data=None, msg=SUCCESS_MSG, with_dt=True, http_status=status.HTTP_200_OK):
    body = {"resultCd": SUCCESS, "resultMsg": msg}
    if with_dt:
        body["resultDt"] = result_dt()
    body["data"] = data
    return Response(body, status=http_status)


def vsdc_error(result_cd, msg, error=None, http_status=status.HTTP_400_BAD_REQUEST):
    return Response(
        {"resultCd": result_cd, "resultMsg": msg, "error": error if error is not None else msg},
        status=http_status,
    )


def parameter_error(error, msg="Request parameter error"):
    return vsdc_error(PARAMETER_ERROR, msg, error, status.HTTP_400_BAD_REQUEST)


def not_found(msg, error=None):
    return vsdc_error(NOT_FOUND, msg, error or msg, status.HTTP_404_NOT_FOUND)


def server_error(error, msg="Unknown server error"):
    return vsdc_error(SERVER_ERROR, msg, error, status.HTTP_500_INTERNAL_SERVER_ERROR)
