from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

from .errors import DuplicateKeyError, InvalidConfigurationError, MenuError, UnknownMenuError
from .factory import MenuFactory, create_menu
from .node import MenuNode

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Named root menus ("main", "sidebar", "breadcrumbs", ...).

    Usage::

        registry = MenuRegistry.from_config({
            "main": {},
            "sidebar": {"items": {"header": {"label": "MAIN NAVIGATION"}}},
        })
        registry.bootstrap()
        registry["sidebar"].add_child({"key": "dashboard", "label": "Dashboard"}, {"after": "header"})

    Batches are applied fail-fast and are not atomic: when a source fails, the
    sources before it in the same call stay applied.
    """

    def __init__(self, menus: Mapping[str, Any] | None = None, factory: MenuFactory | None = None):
        self._menus: Dict[str, MenuNode] = {}
        self._factory: MenuFactory = factory or create_menu
        self._bootstrapped = False
        for name, descriptor in (menus or {}).items():
            self.register(name, descriptor)

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None, factory: MenuFactory | None = None) -> "MenuRegistry":
        return cls(config or {}, factory=factory)

    @property
    def is_bootstrapped(self) -> bool:
        return self._bootstrapped

    def register(self, name: str, menu: Any = None) -> MenuNode:
        name = (name or "").strip()
        if not name:
            raise InvalidConfigurationError("menu name is required")
        if name in self._menus:
            raise DuplicateKeyError(name)
        root = self._factory(menu if menu is not None else {})
        if root.key is None:
            root.key = name
        self._menus[name] = root
        return root

    def get(self, name: str) -> MenuNode:
        try:
            return self._menus[name]
        except KeyError:
            raise UnknownMenuError(name) from None

    def names(self) -> List[str]:
        return list(self._menus)

    def add_menus(self, sources: Iterable[Any]) -> None:
        """Add each ``{"menu": descriptor, "where": position}`` to the root its
        descriptor names in ``add_to``."""
        self._apply(sources, merge=False)

    def merge_menus(self, sources: Iterable[Any]) -> None:
        self._apply(sources, merge=True)

    def bootstrap(self, configs: Iterable[Any] | None = None) -> None:
        """Apply plugin-contributed menu configs once per registry lifetime.

        ``configs`` defaults to the menus of the discovered providers. Order of
        application is the order supplied and decides final item order. The
        registry only counts as bootstrapped after every config applied.
        """
        if self._bootstrapped:
            logger.debug("menu registry already bootstrapped, skipping")
            return
        if configs is None:
            from ..plugins import collect_provider_menus

            configs = collect_provider_menus()

        configs = list(configs)
        logger.info("bootstrapping menus from %s config(s)", len(configs))
        self._apply(configs, merge=False, bare_descriptors=True)
        self._bootstrapped = True
        logger.info("menu bootstrap finished: %s", ", ".join(self.names()) or "<no menus>")

    def to_dict(self) -> Dict[str, Any]:
        return {name: root.to_dict() for name, root in self._menus.items()}

    def _apply(self, sources: Iterable[Any], merge: bool, bare_descriptors: bool = False) -> None:
        for index, source in enumerate(sources or []):
            try:
                menu, where, target = self._resolve_source(index, source, bare_descriptors)
                root = self.get(target)
                if merge:
                    added = root.merge_children(menu.get_children())
                    logger.debug("merged %s item(s) into menu %s", len(added), target)
                else:
                    root.add_children(menu.get_children(), where)
                    logger.debug("added %s item(s) to menu %s where=%s", len(menu.children), target, where)
            except MenuError as exc:
                logger.warning("menu source #%s failed: %s", index, exc)
                raise

    def _resolve_source(self, index: int, source: Any, bare_descriptors: bool) -> Tuple[MenuNode, Any, str]:
        """Accept ``{"menu": descriptor, "where": ...}``, or with ``bare_descriptors``
        a descriptor carrying its own ``add_to``/``where`` (plugin configs)."""
        if not isinstance(source, Mapping):
            raise InvalidConfigurationError(f"menu source #{index} must be a mapping")
        if "menu" in source:
            if source["menu"] is None:
                raise InvalidConfigurationError(f"menu source #{index} is missing 'menu'")
            menu = self._factory(source["menu"])
            target = menu.add_to or source.get("add_to") or source.get("addTo")
            where = source["where"] if "where" in source else menu.where
        else:
            if not bare_descriptors or not source:
                raise InvalidConfigurationError(f"menu source #{index} is missing 'menu'")
            menu = self._factory(source)
            target = menu.add_to
            where = menu.where
        if not target:
            raise InvalidConfigurationError(f"menu source #{index} is missing 'add_to'")
        return menu, where, str(target)

    def __getitem__(self, name: str) -> MenuNode:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._menus

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._menus))

    def __len__(self) -> int:
        return len(self._menus)
