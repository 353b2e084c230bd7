# brewprint_backend/app/db/seed.py
from __future__ import annotations

from typing import List

from brewprint_backend.app.library.library_loader import get_default_brewprints
from brewprint_backend.app.schemas import BrewprintIn
from brewprint_backend.app.services.data_stores.recipes import SqlRecipeStore
from brewprint_backend.app.utils.logs import get_logger

log = get_logger("seed")

def seed_defaults(store: SqlRecipeStore) -> List[str]:
    """
    Insert the library's default brewprints that are not stored yet (matched
    by name). Returns the ids that were created.
    """
    created: List[str] = []
    for raw in get_default_brewprints():
        data = BrewprintIn(**raw)
        if store.find_by_name(data.name) is not None:
            continue
        created.append(store.create_brewprint(data).id)
    if created:
        log.info(f"[seed] added {len(created)} default brewprints")
    return created
