# brewprint_backend/app/services/data_stores/io_utils.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from brewprint_backend.app.utils.io_guards import assert_writable

def read_jsonl(path: Path) -> list:
    """
    Read a .jsonl file, skipping blank and malformed lines. Missing file -> [].
    """
    if not path.exists():
        return []
    out = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            out.append(json.loads(line))
        except json.JSONDecodeError:
            continue
    return out

def append_jsonl(path: Path, obj: Any) -> None:
    """
    Append a JSON object as a single line to a .jsonl file (guarded).
    """
    assert_writable(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, ensure_ascii=False))
        f.write("\n")
