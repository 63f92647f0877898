"""
Settings Manager - Load settings cua spellscan.

File: ~/.spellscan/settings.json (user tu sua bang tay, spellscan chi doc)

API:
    settings = load_app_settings()  # -> AppSettings
"""

import json
from typing import Any

import config.paths as paths
from config.app_settings import AppSettings
from core.logging_config import log_warning


def _read_settings_file() -> dict[str, Any]:
    """
    Doc raw dict tu settings file. File khong ton tai hoac hong -> {}.
    """
    settings_file = paths.SETTINGS_FILE
    try:
        if settings_file.exists():
            data = json.loads(settings_file.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return data
            log_warning(f"Ignoring settings file {settings_file}: not a JSON object")
    except (OSError, json.JSONDecodeError) as e:
        log_warning(f"Ignoring unreadable settings file {settings_file}: {e}")
    return {}


def load_app_settings() -> AppSettings:
    """
    Load settings tu file va tra ve AppSettings typed instance.

    Neu file khong ton tai hoac loi, tra ve defaults.
    """
    return AppSettings.from_dict(_read_settings_file())
