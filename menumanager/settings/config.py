from typing import Any, Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_menus() -> Dict[str, Any]:
    """Root menus every application starts with."""
    return {
        "main": {},
        "sidebar": {
            "items": {
                "header": {
                    "label": "MAIN NAVIGATION",
                    "options": {"class": "header"},
                },
            },
        },
        "breadcrumbs": {},
    }


class Settings(BaseSettings):
    env: str = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Package whose subpackages contribute menus (MENU_PROVIDER_CLASS).
    menu_plugins_package: str = Field(default="menumanager.plugins.contrib")
    bootstrap_on_startup: bool = Field(default=True)
    # name -> root menu descriptor; JSON when given through the environment
    menus: Dict[str, Any] = Field(default_factory=_default_menus)

    model_config = SettingsConfigDict(env_prefix="MENUMANAGER_", env_file=".env", extra="ignore")


settings = Settings()


def reload_settings() -> Settings:
    global settings
    settings = Settings()
    return settings
