# brewprint_backend/app/config/paths.py
from __future__ import annotations

"""
Central path resolution for Brewprint.

Env overrides:
    DATA_DIR
    LIBRARY_DIR

Defaults:
    <repo_root>/data
    <repo_root>/brewprint_backend/app/library

Exports:
    - constants: DATA_DIR, LIBRARY_DIR, REPO_ROOT, APP_ROOT
    - getters: get_data_dir(), get_library_dir()
    - resolvers: resolve_library_file(), resolve_data_file()
    - helpers: path_under_data(), ensure_data_dir_exists()
"""

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "brewprint_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()
APP_ROOT: Path = REPO_ROOT / "brewprint_backend" / "app"

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

_default_data = REPO_ROOT / "data"
_default_library = APP_ROOT / "library"

# DATA_DIR is read lazily so tests can point it at a tmp dir after import
def get_data_dir() -> Path:
    p = (_env_path("DATA_DIR") or _default_data).resolve()
    p.mkdir(parents=True, exist_ok=True)
    return p

def get_library_dir() -> Path:
    return (_env_path("LIBRARY_DIR") or _default_library).resolve()

DATA_DIR: Path = get_data_dir()
LIBRARY_DIR: Path = get_library_dir()

# ── Resolvers
def resolve_library_file(name: str) -> Path:
    """Return absolute path under the library dir for a given filename."""
    return get_library_dir() / name

def resolve_data_file(*parts: str) -> Path:
    """Return absolute path under DATA_DIR for nested parts and ensure parent exists."""
    p = get_data_dir().joinpath(*parts)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p

def path_under_data(*parts: str) -> Path:
    """Alias used by the data stores."""
    return resolve_data_file(*parts)

def ensure_data_dir_exists(*parts: str) -> Path:
    """
    Ensure DATA_DIR (and optional subpaths) exist.
    Examples:
        ensure_data_dir_exists() -> <DATA_DIR>
        ensure_data_dir_exists("sessions") -> <DATA_DIR>/sessions
    """
    p = get_data_dir().joinpath(*parts)
    p.mkdir(parents=True, exist_ok=True)
    return p

__all__ = [
    # constants
    "DATA_DIR", "LIBRARY_DIR", "REPO_ROOT", "APP_ROOT",
    # getters
    "get_data_dir", "get_library_dir",
    # resolvers
    "resolve_library_file", "resolve_data_file",
    # helpers
    "path_under_data", "ensure_data_dir_exists",
]
