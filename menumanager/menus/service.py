from __future__ import annotations

import logging

from ..settings.config import settings
from .registry import MenuRegistry

logger = logging.getLogger(__name__)

_REGISTRY: MenuRegistry | None = None


def get_menu_registry() -> MenuRegistry:
    """Process-wide registry, built from settings and bootstrapped on first use."""
    global _REGISTRY
    if _REGISTRY is None:
        registry = MenuRegistry.from_config(settings.menus)
        if settings.bootstrap_on_startup:
            registry.bootstrap()
        _REGISTRY = registry
    return _REGISTRY


def reset_menu_registry() -> None:
    global _REGISTRY
    if _REGISTRY is not None:
        logger.debug("dropping process-wide menu registry")
    _REGISTRY = None
