from .interfaces import MenuProvider
from .registry import register_menu_provider, unregister_menu_provider
from .service import collect_provider_menus, get_menu_providers

__all__ = [
    "MenuProvider",
    "collect_provider_menus",
    "get_menu_providers",
    "register_menu_provider",
    "unregister_menu_provider",
]
