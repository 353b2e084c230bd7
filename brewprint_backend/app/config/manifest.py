# brewprint_backend/app/config/manifest.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

# ---- DB settings and environment mode ----
from .paths import REPO_ROOT

_DEFAULT_SQLITE_PATH: Path = (REPO_ROOT / "brewprint.sqlite3").resolve()
_env_db_url = os.getenv("DATABASE_URL", "").strip()

# Exported DB_URL (used by db/session.py)
DB_URL: str = _env_db_url or f"sqlite:///{_DEFAULT_SQLITE_PATH}"

# Optional env flags
APP_ENV: str = os.getenv("APP_ENV", "development")
DEBUG_MODE: bool = os.getenv("DEBUG", "0") not in ("", "0", "false", "False")
LOG_LEVEL: str = os.getenv("BREWPRINT_LOG_LEVEL", "DEBUG" if DEBUG_MODE else "INFO").upper()

# ---- Brewing session knobs ----
# Seconds between timer ticks; 1.0 in production, tests inject their own scheduler.
TICK_INTERVAL_S: float = float(os.getenv("BREWPRINT_TICK_INTERVAL_S", "1.0"))
# Stored brewprints without a total_time get this target (4 minutes).
DEFAULT_TOTAL_TIME_S: float = float(os.getenv("BREWPRINT_DEFAULT_TOTAL_TIME_S", "240"))

# ---- Library validation manifest ----
from brewprint_backend.app.library.library_loader import has_library_file, inventory

LIBRARY_REQUIRED: List[str] = [
    "default_brewprints.yaml",
]

LIBRARY_OPTIONAL: List[str] = [
    "techniques.yaml",
]

def validate_manifest() -> Dict[str, object]:
    inv = inventory()

    missing_required: List[str] = [n for n in LIBRARY_REQUIRED if not has_library_file(n)]
    missing_optional: List[str] = [n for n in LIBRARY_OPTIONAL if not has_library_file(n)]

    status = "ok" if not missing_required else "missing_required"
    return {
        "status": status,
        "inventory": inv,
        "required": LIBRARY_REQUIRED,
        "optional": LIBRARY_OPTIONAL,
        "missing_required": missing_required,
        "missing_optional": missing_optional,
    }


__all__ = [
    "DB_URL", "APP_ENV", "DEBUG_MODE", "LOG_LEVEL",
    "TICK_INTERVAL_S", "DEFAULT_TOTAL_TIME_S",
    "validate_manifest",
]
