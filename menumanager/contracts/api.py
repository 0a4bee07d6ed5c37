from __future__ import annotations

from typing import Any

from .errors import ErrorCode
from .responses import ApiMetaModel, fail, ok


def _menu_meta(menu: str | None, bootstrapped: bool | None, meta: dict[str, Any] | None) -> ApiMetaModel:
    values = dict(meta or {})
    if menu is not None:
        values.setdefault("menu", menu)
    if bootstrapped is not None:
        values.setdefault("bootstrapped", bootstrapped)
    return ApiMetaModel(**values)


def success_response(
    data: Any = None,
    *,
    menu: str | None = None,
    bootstrapped: bool | None = None,
    meta: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Envelope for a menu request; ``menu`` and ``bootstrapped`` land in ``meta``."""
    return ok(data, meta=_menu_meta(menu, bootstrapped, meta))


def error_response(
    code: ErrorCode,
    message: str,
    *,
    details: dict[str, Any] | None = None,
    menu: str | None = None,
    meta: dict[str, Any] | None = None,
) -> dict[str, Any]:
    return fail(code, message, details=details, meta=_menu_meta(menu, None, meta))
