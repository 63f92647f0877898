"""
Application Paths - Centralized path definitions cho spellscan

Module nay dinh nghia tat ca cac duong dan su dung trong ung dung.
Tap trung o mot noi de tranh hardcode rai rac va dam bao consistency.

App data duoc luu tai: ~/.spellscan/
- logs/         : Log files
- settings.json : Settings mac dinh cho moi lan chay
"""

import os
from pathlib import Path


# =============================================================================
# Ten ung dung - Single source of truth cho naming
# =============================================================================
APP_NAME = "spellscan"

# =============================================================================
# Thu muc goc cua ung dung
# =============================================================================
APP_DIR = Path.home() / f".{APP_NAME}"

# =============================================================================
# Cac thu muc con va file cau hinh
# =============================================================================
LOG_DIR = APP_DIR / "logs"
SETTINGS_FILE = APP_DIR / "settings.json"

# =============================================================================
# System word lists - dung khi user khong chi dinh dictionary
# =============================================================================
SYSTEM_WORD_LISTS = (
    Path("/usr/share/dict/words"),
    Path("/usr/dict/words"),
)

# =============================================================================
# Environment Variables - Ten bien moi truong cho debug mode
# =============================================================================
DEBUG_ENV_VAR = "SPELLSCAN_DEBUG"

# Kiem tra debug mode tu environment variable
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")

