from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .collection import OrderedItemCollection
from .errors import InvalidConfigurationError

if TYPE_CHECKING:  # pragma: no cover
    from .factory import MenuFactory

logger = logging.getLogger(__name__)

NODE_ATTRIBUTES = ("label", "url", "icon", "visible", "active", "options")


@dataclass(eq=False, slots=True)
class MenuNode:
    """A menu entry together with the ordered children it owns."""

    key: str | None = None
    label: Any = None
    url: Any = None
    icon: Any = None
    visible: bool = True
    active: bool = False
    options: Dict[str, Any] = field(default_factory=dict)
    add_to: str | None = None
    where: Any = None
    children: OrderedItemCollection["MenuNode"] = field(default_factory=OrderedItemCollection)

    def default_items(self) -> Any:
        """Built-in children of this node type; added before configured items."""
        return []

    def add_children(self, items: Any, position: Any = None) -> None:
        """Insert ``items`` as one batch at ``position`` (a single shared anchor)."""
        self.children.insert_many(_node_pairs(items), position)

    def add_child(self, item: Any, position: Any = None) -> "MenuNode":
        pairs = _node_pairs([item], auto_key_from=self.children)
        self.children.insert_many(pairs, position)
        return pairs[0][1]

    def merge_children(self, items: Any) -> List[str]:
        """Append only the children whose keys this node does not have yet."""
        return self.children.merge(_node_pairs(items))

    def set_children(self, items: Any) -> None:
        """Replace all children. A rejected batch leaves the current ones in place."""
        fresh: OrderedItemCollection["MenuNode"] = OrderedItemCollection()
        fresh.insert_many(_node_pairs(items, auto_key_from=fresh))
        self.children = fresh

    def replace_child(self, key: str, item: Any) -> None:
        node = _as_node(item, key=key)
        node.key = key
        self.children.replace(key, node)

    def remove_child(self, key: str) -> "MenuNode":
        return self.children.remove(key)

    def get_children(self) -> List["MenuNode"]:
        return self.children.values()

    def add_menus(self, sources: Iterable[Any], factory: Optional["MenuFactory"] = None) -> None:
        """Build each ``{"menu": ..., "where": ...}`` source and add its children here."""
        for menu, where in _iter_sources(sources, factory):
            self.add_children(menu.get_children(), where)

    def merge_menus(self, sources: Iterable[Any], factory: Optional["MenuFactory"] = None) -> None:
        for menu, _ in _iter_sources(sources, factory):
            self.merge_children(menu.get_children())

    def find(self, path: str) -> "MenuNode":
        node = self
        for part in [p for p in str(path).split(".") if p]:
            node = node.children[part]
        return node

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "url": self.url,
            "icon": self.icon,
            "visible": self.visible,
            "active": self.active,
            "options": dict(self.options),
            "items": [child.to_dict() for child in self.get_children()],
        }


def node_from_spec(spec: Any, key: str | None = None, node_cls: type[MenuNode] = MenuNode) -> MenuNode:
    """Build a node (and its ``items`` subtree) from a plain mapping.

    A bare string becomes a label-only node.
    """
    if isinstance(spec, MenuNode):
        return spec
    if isinstance(spec, str):
        return node_cls(key=key, label=spec)
    if not isinstance(spec, Mapping):
        raise InvalidConfigurationError(f"menu item must be a mapping, got {type(spec).__name__}")

    allowed = set(NODE_ATTRIBUTES) | {"key", "items", "add_to", "addTo", "where"}
    unknown = sorted(set(spec) - allowed)
    if unknown:
        raise InvalidConfigurationError(f"unknown menu item attributes: {', '.join(unknown)}")

    raw_key = spec.get("key", key)
    options = spec.get("options") or {}
    if not isinstance(options, Mapping):
        raise InvalidConfigurationError("menu item options must be a mapping")
    node = node_cls(
        key=str(raw_key) if raw_key is not None else None,
        label=spec.get("label"),
        url=spec.get("url"),
        icon=spec.get("icon"),
        visible=True if spec.get("visible") is None else bool(spec["visible"]),
        active=bool(spec.get("active")),
        options=dict(options),
        add_to=spec.get("add_to", spec.get("addTo")),
        where=spec.get("where"),
    )
    items = spec.get("items")
    if items:
        node.add_children(items)
    return node


def _as_node(item: Any, key: str | None = None) -> MenuNode:
    """Build the node a parent will own. Existing nodes are deep-copied so that
    no subtree ends up under two parents and the caller's node keeps its key."""
    if isinstance(item, MenuNode):
        node = copy.deepcopy(item)
    else:
        node = node_from_spec(item, key=key)
    if key is not None and node.key is None:
        node.key = key
    return node


def _node_pairs(items: Any, auto_key_from: OrderedItemCollection | None = None) -> List[Tuple[str, MenuNode]]:
    """Normalize a batch to ``(key, node)`` pairs.

    Accepts a mapping ``{key: spec}``, a collection, or a sequence of specs.
    Keyless sequence entries get the next free integer key when
    ``auto_key_from`` is given, and are rejected otherwise.
    """
    if items is None:
        return []
    if isinstance(items, OrderedItemCollection):
        items = dict(items.items())
    if isinstance(items, MenuNode):
        raise InvalidConfigurationError("pass a sequence of menu items, not a single node")
    pairs: List[Tuple[str, MenuNode]] = []
    if isinstance(items, Mapping):
        for key, spec in items.items():
            node = _as_node(spec, key=str(key))
            node.key = str(key)
            pairs.append((node.key, node))
        return pairs
    if isinstance(items, (str, bytes)):
        raise InvalidConfigurationError("menu items must be a sequence or a mapping")

    nodes = [(spec, _as_node(spec)) for spec in items]
    taken = set(auto_key_from.keys()) if auto_key_from is not None else set()
    taken.update(node.key for _, node in nodes if node.key is not None)
    counter = 0
    for spec, node in nodes:
        if node.key is None:
            if auto_key_from is None:
                raise InvalidConfigurationError(f"menu item without key: {spec!r}")
            while str(counter) in taken:
                counter += 1
            node.key = str(counter)
            taken.add(node.key)
        pairs.append((node.key, node))
    return pairs


def _iter_sources(sources: Iterable[Any], factory: Optional["MenuFactory"]):
    if factory is None:
        from .factory import create_menu

        factory = create_menu
    for index, source in enumerate(sources or []):
        if not isinstance(source, Mapping) or source.get("menu") is None:
            raise InvalidConfigurationError(f"menu source #{index} is missing 'menu'")
        menu = factory(source["menu"])
        where = source.get("where", menu.where)
        logger.debug("applying menu source #%s where=%s", index, where)
        yield menu, where
