from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Any, Dict, List, Type

from ..settings.config import settings
from .interfaces import MenuProvider
from .registry import get_registered_provider_factories, register_menu_provider

logger = logging.getLogger(__name__)

_BOOTSTRAPPED = False


def _ensure_builtin_providers() -> None:
    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return

    package_name = settings.menu_plugins_package
    if package_name:
        package = importlib.import_module(package_name)
        for module_info in pkgutil.iter_modules(package.__path__):
            if not module_info.ispkg:
                continue
            module = importlib.import_module(f"{package.__name__}.{module_info.name}")
            provider_cls = getattr(module, "MENU_PROVIDER_CLASS", None)
            if provider_cls is None or not isinstance(provider_cls, type):
                continue
            provider_key = (getattr(module, "PROVIDER_KEY", "") or module_info.name).strip().lower()
            if not provider_key:
                continue
            order = getattr(module, "PROVIDER_ORDER", None)
            register_menu_provider(provider_key, _factory_for(provider_cls, provider_key, order))
            logger.debug("registered menu provider %s from %s", provider_key, module.__name__)
    _BOOTSTRAPPED = True


def _factory_for(provider_cls: Type[MenuProvider], provider_key: str, order: int | None = None):
    def _build() -> MenuProvider:
        provider = provider_cls()
        if not getattr(provider, "provider_key", ""):
            provider.provider_key = provider_key  # type: ignore[attr-defined]
        if order is not None:
            provider.order = int(order)  # type: ignore[attr-defined]
        return provider

    return _build


def get_menu_providers() -> List[MenuProvider]:
    """Registered providers ordered by ``(order, provider_key)``."""
    _ensure_builtin_providers()
    providers = []
    for provider_key, factory in get_registered_provider_factories():
        provider = factory()
        providers.append((int(getattr(provider, "order", 0) or 0), provider_key, provider))
    providers.sort(key=lambda item: (item[0], item[1]))
    return [provider for _, _, provider in providers]


def collect_provider_menus() -> List[Dict[str, Any]]:
    configs: List[Dict[str, Any]] = []
    for provider in get_menu_providers():
        menus = list(provider.get_menus() or [])
        logger.debug("provider %s contributes %s menu config(s)", provider.provider_key, len(menus))
        configs.extend(menus)
    return configs
