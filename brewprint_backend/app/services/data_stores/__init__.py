# brewprint_backend/app/services/data_stores/__init__.py
"""
Unified export surface for data store helpers.

Import from here in routers/engine code, e.g.:
    from brewprint_backend.app.services.data_stores import (
        # IO
        append_jsonl, read_jsonl,
        # Sessions
        append_session, list_sessions,
        # Recipes
        SqlRecipeStore, RecipeLookup,
    )
"""

from __future__ import annotations

# ---- Low-level IO helpers ----
from .io_utils import append_jsonl, read_jsonl  # noqa: F401

# ---- Sessions store ----
from .sessions import (  # noqa: F401
    append_session,
    list_sessions,
)

# ---- Recipes store ----
from .recipes import (  # noqa: F401
    RecipeLookup,
    SqlRecipeStore,
    record_to_recipe,
    record_to_out,
)

__all__ = [
    # io_utils
    "append_jsonl", "read_jsonl",
    # sessions
    "append_session", "list_sessions",
    # recipes
    "RecipeLookup", "SqlRecipeStore", "record_to_recipe", "record_to_out",
]
