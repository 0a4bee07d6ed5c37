from .provider import DashboardMenuProvider

MENU_PROVIDER_CLASS = DashboardMenuProvider

__all__ = [
    "DashboardMenuProvider",
    "MENU_PROVIDER_CLASS",
]
