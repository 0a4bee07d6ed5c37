"""Hierarchical menu configuration: named menu trees assembled from plugins."""

from .menus import (
    DuplicateKeyError,
    InvalidConfigurationError,
    MenuError,
    MenuNode,
    MenuRegistry,
    NotFoundError,
    OrderedItemCollection,
    Position,
    PositionNotFoundError,
    UnknownMenuError,
    create_menu,
    get_menu_registry,
    register_menu_type,
)

__all__ = [
    "DuplicateKeyError",
    "InvalidConfigurationError",
    "MenuError",
    "MenuNode",
    "MenuRegistry",
    "NotFoundError",
    "OrderedItemCollection",
    "Position",
    "PositionNotFoundError",
    "UnknownMenuError",
    "create_menu",
    "get_menu_registry",
    "register_menu_type",
]

__version__ = "0.1.0"
