# brewprint_backend/app/utils/io_guards.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from brewprint_backend.app.config.paths import get_library_dir

def _is_under(path: Path, roots: Iterable[Path]) -> bool:
    p = path.resolve()
    for r in roots:
        try:
            p.relative_to(r)
            return True
        except ValueError:
            continue
    return False

def assert_writable(path: Path) -> None:
    """
    Raise an AssertionError if `path` is under the shipped library dir
    (default brewprints, technique labels). Call before any write.
    """
    if _is_under(path, [get_library_dir().resolve()]):
        raise AssertionError(
            f"Attempted write under read-only library directory: {path} "
            f"(library={get_library_dir()})"
        )
