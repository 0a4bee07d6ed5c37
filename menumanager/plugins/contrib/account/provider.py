from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ...interfaces import MenuProvider
from .mappings import MENU_CONFIG


@dataclass(slots=True)
class AccountMenuProvider(MenuProvider):
    provider_key: str = "account"
    # Anchors on entries the dashboard provider adds, so it has to run after it.
    order: int = 20

    def get_menus(self) -> List[Dict[str, Any]]:
        return MENU_CONFIG
