from __future__ import annotations


MENU_CONFIG = [
    {
        "add_to": "sidebar",
        "where": {"after": "dashboard"},
        "items": [
            {
                "key": "account",
                "label": "Account",
                "icon": "fa-user",
                "items": [
                    {"key": "profile", "label": "Profile", "url": "/account/profile"},
                    {"key": "security", "label": "Security", "url": "/account/security"},
                ],
            },
        ],
    },
    {
        "add_to": "main",
        "items": [
            {"key": "logout", "label": "Logout", "url": "/logout", "icon": "fa-sign-out"},
        ],
    },
]
