# brewprint_backend/app/library/library_loader.py
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml  # PyYAML

from brewprint_backend.app.config.paths import get_library_dir, resolve_library_file

# -----------------------------------------------------------------------------
# Logger
# -----------------------------------------------------------------------------
log = logging.getLogger("brewprint.library_loader")
if not log.handlers:
    handler = logging.StreamHandler()
    log.addHandler(handler)
    log.setLevel(logging.INFO)

# -----------------------------------------------------------------------------
# Internal IO helpers
# -----------------------------------------------------------------------------
def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")

def _load_json_from(path: Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

def _load_yaml_from(path: Path) -> Any:
    try:
        return yaml.safe_load(_read_text(path))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

# -----------------------------------------------------------------------------
# Public loader API
# -----------------------------------------------------------------------------
@lru_cache(maxsize=32)
def load_library_file(filename: str) -> Any:
    """
    Load a JSON or YAML file from the library dir (picked by suffix).
    Raises FileNotFoundError if not present.
    """
    path = resolve_library_file(filename)
    if not path.exists():
        raise FileNotFoundError(f"Library file not found: {path}")
    if path.suffix in (".yaml", ".yml"):
        obj = _load_yaml_from(path)
    else:
        obj = _load_json_from(path)
    log.info(f"[library] loaded {filename} from {path}")
    return obj

def has_library_file(filename: str) -> bool:
    return resolve_library_file(filename).exists()

def inventory() -> Dict[str, List[str]]:
    """
    List the data files shipped in the library dir.
    """
    base = get_library_dir()
    if not base.exists():
        return {"library": []}
    names = sorted(
        p.name for p in base.iterdir()
        if p.is_file() and p.suffix in (".json", ".yaml", ".yml")
    )
    return {"library": names}

# -----------------------------------------------------------------------------
# Convenience accessors for well-known files
# -----------------------------------------------------------------------------
_DEFAULT_BREWPRINTS = "default_brewprints.yaml"
_TECHNIQUES = "techniques.yaml"  # optional

def get_default_brewprints() -> List[Dict[str, Any]]:
    """
    Returns the seed brewprints (required). Accepts either a bare list or
    {"brewprints": [...]}.
    """
    data = load_library_file(_DEFAULT_BREWPRINTS)
    if isinstance(data, dict):
        data = data.get("brewprints") or []
    if not isinstance(data, list):
        log.info("[library] default brewprints had unexpected schema; ignoring.")
        return []
    return [d for d in data if isinstance(d, dict)]

def get_technique_labels() -> Dict[str, str]:
    """
    Human labels for pour techniques, e.g. {"center-pour": "Center pour"}.
    Returns {} when the optional file is missing.
    """
    if not has_library_file(_TECHNIQUES):
        return {}
    data = load_library_file(_TECHNIQUES)
    if not isinstance(data, dict):
        return {}
    return {str(k).strip().lower(): str(v) for k, v in data.items()}
