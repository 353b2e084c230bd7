# brewprint_backend/app/services/data_stores/sessions.py
from __future__ import annotations

import time, datetime as dt
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional

from brewprint_backend.app.config.paths import path_under_data, ensure_data_dir_exists
from .io_utils import append_jsonl, read_jsonl

# Directory: ./data/sessions/<YYYY-MM-DD>.jsonl
_IO_LOCK = RLock()

def _date_str(ts: Optional[float] = None) -> str:
    return dt.datetime.fromtimestamp(ts or time.time()).strftime("%Y-%m-%d")

def _session_path_for_date(date_str: str) -> Path:
    return path_under_data("sessions", f"{date_str}.jsonl")

def append_session(session_obj: Dict[str, Any], date_str: Optional[str] = None) -> Path:
    """
    Append a finished brew session (snapshot + metrics) to the day's JSONL file.
    """
    payload = dict(session_obj or {})
    payload.setdefault("_ts", time.time())
    payload.setdefault("_type", "session")
    date = date_str or _date_str(payload["_ts"])
    path = _session_path_for_date(date)
    with _IO_LOCK:
        append_jsonl(path, payload)
    return path

def list_sessions(date_str: Optional[str] = None, limit: int = 200, newest_first: bool = True) -> List[Dict[str, Any]]:
    """
    Read sessions from one day (if provided) or all files. Returns at most `limit` items.
    """
    base = ensure_data_dir_exists("sessions")
    if date_str:
        files = [_session_path_for_date(date_str)]
    else:
        files = sorted(base.glob("*.jsonl"))

    out: List[Dict[str, Any]] = []
    with _IO_LOCK:
        for p in files:
            out.extend(o for o in read_jsonl(p) if isinstance(o, dict))

    out.sort(key=lambda x: x.get("_ts", 0), reverse=newest_first)
    return out[: max(0, min(limit, 2000))]
