"""Menu trees: ordered collections, nodes, the factory and the registry."""

from .collection import APPEND, OrderedItemCollection, Position
from .errors import (
    DuplicateKeyError,
    InvalidConfigurationError,
    MenuError,
    NotFoundError,
    PositionNotFoundError,
    UnknownMenuError,
)
from .factory import MenuFactory, create_menu, get_menu_type, register_menu_type, unregister_menu_type
from .node import MenuNode, node_from_spec
from .registry import MenuRegistry
from .service import get_menu_registry, reset_menu_registry

__all__ = [
    "APPEND",
    "DuplicateKeyError",
    "InvalidConfigurationError",
    "MenuError",
    "MenuFactory",
    "MenuNode",
    "MenuRegistry",
    "NotFoundError",
    "OrderedItemCollection",
    "Position",
    "PositionNotFoundError",
    "UnknownMenuError",
    "create_menu",
    "get_menu_registry",
    "get_menu_type",
    "node_from_spec",
    "register_menu_type",
    "reset_menu_registry",
    "unregister_menu_type",
]
