from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..contracts import HTTP_STATUS_BY_CODE, error_response, map_exception_to_error, success_response
from ..menus import MenuError, MenuNode, MenuRegistry, get_menu_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menus", tags=["menus"])


class MenuItemPayload(BaseModel):
    key: str | None = None
    label: Any = None
    url: Any = None
    icon: Any = None
    visible: bool = Field(default=True)
    active: bool = Field(default=False)
    options: dict = Field(default_factory=dict)
    items: list[dict] = Field(default_factory=list)
    where: dict | str | None = Field(default=None)

    def to_spec(self) -> dict:
        return self.model_dump(exclude={"where"}, exclude_none=True)


class MenuItemsPayload(BaseModel):
    items: list[MenuItemPayload | str] = Field(default_factory=list)


def _menu_error_response(exc: MenuError, menu_name: str) -> JSONResponse:
    code, message, details = map_exception_to_error(exc)
    logger.info("menu request rejected: menu=%s code=%s message=%s", menu_name, code.value, message)
    return JSONResponse(
        status_code=HTTP_STATUS_BY_CODE[code],
        content=error_response(code, message, details=details, menu=menu_name),
    )


def _target(registry: MenuRegistry, name: str, parent: str | None) -> MenuNode:
    root = registry.get(name)
    return root.find(parent) if parent else root


@router.get("")
def list_menus(registry: MenuRegistry = Depends(get_menu_registry)):
    return success_response(
        {"items": registry.names()},
        bootstrapped=registry.is_bootstrapped,
    )


@router.get("/{name}")
def get_menu(name: str, registry: MenuRegistry = Depends(get_menu_registry)):
    try:
        root = registry.get(name)
    except MenuError as exc:
        return _menu_error_response(exc, name)
    return success_response({"menu": root.to_dict()}, menu=name)


@router.post("/{name}/items", status_code=201)
def add_menu_item(
    name: str,
    payload: MenuItemPayload,
    parent: str | None = Query(default=None),
    registry: MenuRegistry = Depends(get_menu_registry),
):
    try:
        target = _target(registry, name, parent)
        node = target.add_child(payload.to_spec(), payload.where)
    except MenuError as exc:
        return _menu_error_response(exc, name)
    return success_response({"item": node.to_dict(), "index": target.children.index_of(node.key)}, menu=name)


@router.put("/{name}/items")
def set_menu_items(
    name: str,
    payload: MenuItemsPayload,
    parent: str | None = Query(default=None),
    registry: MenuRegistry = Depends(get_menu_registry),
):
    specs = [item if isinstance(item, str) else item.to_spec() for item in payload.items]
    try:
        target = _target(registry, name, parent)
        target.set_children(specs)
    except MenuError as exc:
        return _menu_error_response(exc, name)
    return success_response({"menu": target.to_dict()}, menu=name)


@router.delete("/{name}/items/{key}")
def remove_menu_item(
    name: str,
    key: str,
    parent: str | None = Query(default=None),
    registry: MenuRegistry = Depends(get_menu_registry),
):
    try:
        removed = _target(registry, name, parent).remove_child(key)
    except MenuError as exc:
        return _menu_error_response(exc, name)
    return success_response({"item": removed.to_dict()}, menu=name)
