# brewprint_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# DB, logging and session settings live in manifest.py
from .manifest import (
    DB_URL,
    APP_ENV,
    DEBUG_MODE,
    LOG_LEVEL,
    TICK_INTERVAL_S,
    DEFAULT_TOTAL_TIME_S,
    validate_manifest,
)

# Path helpers live in paths.py
from .paths import (
    REPO_ROOT,
    APP_ROOT,
    DATA_DIR,
    LIBRARY_DIR,
    get_data_dir,
    resolve_library_file,
    resolve_data_file,
    path_under_data,
    ensure_data_dir_exists,
)

__all__ = [
    # manifest
    "DB_URL",
    "APP_ENV",
    "DEBUG_MODE",
    "LOG_LEVEL",
    "TICK_INTERVAL_S",
    "DEFAULT_TOTAL_TIME_S",
    "validate_manifest",
    # paths
    "REPO_ROOT",
    "APP_ROOT",
    "DATA_DIR",
    "LIBRARY_DIR",
    "get_data_dir",
    "resolve_library_file",
    "resolve_data_file",
    "path_under_data",
    "ensure_data_dir_exists",
]
