from .provider import AccountMenuProvider

PROVIDER_KEY = "account"
MENU_PROVIDER_CLASS = AccountMenuProvider

__all__ = [
    "AccountMenuProvider",
    "MENU_PROVIDER_CLASS",
    "PROVIDER_KEY",
]
