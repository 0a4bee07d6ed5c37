from .menu import MENU_CONFIG

__all__ = ["MENU_CONFIG"]
