from __future__ import annotations

import logging

from fastapi import FastAPI

from .menus import get_menu_registry
from .settings.config import settings

logger = logging.getLogger(__name__)


def register_startup_hooks(app: FastAPI) -> None:
    @app.on_event("startup")
    def _bootstrap_menus() -> None:
        """Build the process-wide menu registry before the first request.

        Bootstrap errors propagate and abort startup.
        """
        if not settings.bootstrap_on_startup:
            logger.info("menu bootstrap on startup disabled")
            return
        registry = get_menu_registry()
        logger.info("menus ready: %s", ", ".join(registry.names()))
