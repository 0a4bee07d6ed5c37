from __future__ import annotations

from enum import Enum
from typing import Any

from ..menus.errors import (
    DuplicateKeyError,
    InvalidConfigurationError,
    NotFoundError,
    PositionNotFoundError,
    UnknownMenuError,
)


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    CONFIG_ERROR = "CONFIG_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


HTTP_STATUS_BY_CODE = {
    ErrorCode.INVALID_INPUT: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.CONFIG_ERROR: 400,
    ErrorCode.INTERNAL_ERROR: 500,
}


def map_exception_to_error(exc: Exception) -> tuple[ErrorCode, str, dict[str, Any] | None]:
    msg = str(exc) or exc.__class__.__name__
    if isinstance(exc, UnknownMenuError):
        return ErrorCode.NOT_FOUND, msg, {"menu": exc.key}
    if isinstance(exc, NotFoundError):
        return ErrorCode.NOT_FOUND, msg, {"key": exc.key}
    if isinstance(exc, DuplicateKeyError):
        return ErrorCode.CONFLICT, msg, {"key": exc.key}
    if isinstance(exc, PositionNotFoundError):
        return ErrorCode.INVALID_INPUT, msg, {"anchor": exc.anchor}
    if isinstance(exc, InvalidConfigurationError):
        return ErrorCode.CONFIG_ERROR, msg, None
    return ErrorCode.INTERNAL_ERROR, msg, {"exception_type": exc.__class__.__name__}
