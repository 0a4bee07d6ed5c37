from __future__ import annotations

from typing import Any, Dict, List, Protocol


class MenuProvider(Protocol):
    provider_key: str
    # Lower runs first; ties are broken by provider_key.
    order: int

    def get_menus(self) -> List[Dict[str, Any]]:
        """Menu configs applied at bootstrap.

        Each entry is a descriptor carrying ``add_to`` (root menu name), an
        optional ``where`` position and the ``items`` to add, or a
        ``{"menu": descriptor, "where": position}`` source.
        """
        ...
