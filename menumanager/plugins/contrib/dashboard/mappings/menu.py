from __future__ import annotations


MENU_CONFIG = [
    {
        "add_to": "main",
        "items": [
            {"key": "home", "label": "Home", "url": "/", "icon": "fa-home"},
            {"key": "dashboard", "label": "Dashboard", "url": "/dashboard", "icon": "fa-dashboard"},
        ],
    },
    {
        "add_to": "sidebar",
        "where": {"after": "header"},
        "items": [
            {"key": "dashboard", "label": "Dashboard", "url": "/dashboard", "icon": "fa-dashboard"},
        ],
    },
]
