"""Settings modules for the attendance service.

APP_ENV picks which module (development, testing, production) supplies
DATA_FILE, DEFAULT_SUBJECT, LOG_LEVEL and the server options.
"""

import importlib
import os
from types import ModuleType

_MODULES_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # Unknown or missing APP_ENV falls back to development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _MODULES_BY_ENV.get(env, "config.development")


def load_settings() -> ModuleType:
    return importlib.import_module(get_settings_module())
