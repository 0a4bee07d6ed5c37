"""Standardized API contracts."""

from .api import error_response, success_response
from .errors import HTTP_STATUS_BY_CODE, ErrorCode, map_exception_to_error
from .responses import ApiEnvelope, ApiErrorModel, ApiMetaModel, fail, ok

__all__ = [
    "ApiEnvelope",
    "ApiErrorModel",
    "ApiMetaModel",
    "ErrorCode",
    "HTTP_STATUS_BY_CODE",
    "error_response",
    "fail",
    "map_exception_to_error",
    "ok",
    "success_response",
]
