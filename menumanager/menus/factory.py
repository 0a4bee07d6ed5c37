from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from .errors import InvalidConfigurationError
from .node import MenuNode, node_from_spec

MenuFactory = Callable[[Any], MenuNode]

_TYPE_REGISTRY: Dict[str, type[MenuNode]] = {}

_DESCRIPTOR_ONLY_KEYS = ("type", "items", "add", "merge")


def _normalize_type_name(name: str | None) -> str:
    return (name or "").strip().lower()


def register_menu_type(name: str, node_cls: type[MenuNode]) -> None:
    normalized = _normalize_type_name(name)
    if not normalized:
        raise ValueError("menu type name is required")
    if not isinstance(node_cls, type) or not issubclass(node_cls, MenuNode):
        raise TypeError(f"menu type {name!r} must be a MenuNode subclass")
    _TYPE_REGISTRY[normalized] = node_cls


def unregister_menu_type(name: str) -> None:
    _TYPE_REGISTRY.pop(_normalize_type_name(name), None)


def get_menu_type(name: str) -> type[MenuNode]:
    normalized = _normalize_type_name(name)
    try:
        return _TYPE_REGISTRY[normalized]
    except KeyError:
        raise InvalidConfigurationError(f"unknown menu type: {name}") from None


def create_menu(descriptor: Any) -> MenuNode:
    """Build a menu sub-tree from a descriptor.

    The descriptor is either a registered type name or a mapping with an
    optional ``type`` plus node attributes. Children are assembled in the order
    ``default_items()``, ``items``, ``add`` sources, ``merge`` sources.
    """
    if isinstance(descriptor, MenuNode):
        return descriptor
    if isinstance(descriptor, str):
        descriptor = {"type": descriptor}
    if not isinstance(descriptor, Mapping):
        raise InvalidConfigurationError(f"menu descriptor must be a mapping, got {type(descriptor).__name__}")

    type_name = descriptor.get("type")
    node_cls = get_menu_type(type_name) if type_name else MenuNode
    attributes = {k: v for k, v in descriptor.items() if k not in _DESCRIPTOR_ONLY_KEYS}
    node = node_from_spec(attributes, node_cls=node_cls)

    node.add_children(node.default_items())
    if descriptor.get("items"):
        node.add_children(descriptor["items"])
    if descriptor.get("add"):
        node.add_menus(descriptor["add"], factory=create_menu)
    if descriptor.get("merge"):
        node.merge_menus(descriptor["merge"], factory=create_menu)
    return node
