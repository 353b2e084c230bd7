# brewprint_backend/app/services/router_helpers/recipes_helpers.py
from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from brewprint_backend.app.db.seed import seed_defaults
from brewprint_backend.app.db.session import engine, init_db
from brewprint_backend.app.schemas import BrewprintIn, BrewResultIn
from brewprint_backend.app.services.brewing import RecipeNotFound
from brewprint_backend.app.services.data_stores.recipes import SqlRecipeStore

_STORE: Optional[SqlRecipeStore] = None
_STORE_LOCK = threading.Lock()

def get_store() -> SqlRecipeStore:
    """Lazily create tables, seed default brewprints, and hand out the store."""
    global _STORE
    with _STORE_LOCK:
        if _STORE is None:
            init_db()
            store = SqlRecipeStore(engine)
            seed_defaults(store)
            _STORE = store
        return _STORE

# ---- public helpers used by router ----
def list_all(method: Optional[str] = None) -> Dict[str, Any]:
    items = get_store().list_brewprints(method=method)
    return {"ok": True, "count": len(items), "items": [i.model_dump(mode="json") for i in items]}

def read_one(recipe_id: str) -> Dict[str, Any]:
    try:
        return get_store().get_brewprint(recipe_id).model_dump(mode="json")
    except RecipeNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

def create_one(payload: BrewprintIn) -> Dict[str, Any]:
    out = get_store().create_brewprint(payload)
    return {"ok": True, "brewprint": out.model_dump(mode="json")}

def record_result(recipe_id: str, result: BrewResultIn) -> Dict[str, Any]:
    try:
        out = get_store().record_brew_result(recipe_id, result)
    except RecipeNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"ok": True, "brewprint": out.model_dump(mode="json")}
