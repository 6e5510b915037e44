"""ScholarHub settings modules.

``APP_ENV`` chooses which module ``create_app`` and the scripts import:
``production``/``prod``, ``testing``/``test``, anything else is development.
"""

import os

_ALIASES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    return _ALIASES.get(os.getenv("APP_ENV", "development").strip().lower(), "config.development")
