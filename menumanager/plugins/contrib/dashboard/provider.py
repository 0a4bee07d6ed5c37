from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ...interfaces import MenuProvider
from .mappings import MENU_CONFIG


@dataclass(slots=True)
class DashboardMenuProvider(MenuProvider):
    provider_key: str = "dashboard"
    order: int = 10

    def get_menus(self) -> List[Dict[str, Any]]:
        return MENU_CONFIG
