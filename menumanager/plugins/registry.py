from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from .interfaces import MenuProvider

ProviderFactory = Callable[[], MenuProvider]

_REGISTRY: Dict[str, ProviderFactory] = {}


def _normalize_provider_key(provider_key: str | None) -> str:
    return (provider_key or "").strip().lower()


def register_menu_provider(provider_key: str, factory: ProviderFactory) -> None:
    normalized = _normalize_provider_key(provider_key)
    if not normalized:
        raise ValueError("provider_key is required")
    _REGISTRY[normalized] = factory


def unregister_menu_provider(provider_key: str) -> None:
    _REGISTRY.pop(_normalize_provider_key(provider_key), None)


def get_registered_provider_factories() -> List[Tuple[str, ProviderFactory]]:
    return list(_REGISTRY.items())
