from __future__ import annotations

from typing import Any


class MenuError(Exception):
    """Base class for menu assembly errors."""


class DuplicateKeyError(MenuError):
    def __init__(self, key: str):
        super().__init__(f"duplicate menu key: {key}")
        self.key = key


class PositionNotFoundError(MenuError):
    def __init__(self, anchor: Any, message: str | None = None):
        super().__init__(message or f"position anchor not found: {anchor}")
        self.anchor = anchor


class NotFoundError(MenuError, KeyError):
    def __init__(self, key: str, message: str | None = None):
        super().__init__(message or f"menu item not found: {key}")
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class UnknownMenuError(NotFoundError):
    def __init__(self, name: str):
        super().__init__(name, f"unknown menu: {name}")


class InvalidConfigurationError(MenuError, ValueError):
    pass
