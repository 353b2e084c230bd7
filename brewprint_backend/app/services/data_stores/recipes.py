# brewprint_backend/app/services/data_stores/recipes.py
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from brewprint_backend.app.config.manifest import DEFAULT_TOTAL_TIME_S
from brewprint_backend.app.db.models import BrewprintRecord
from brewprint_backend.app.schemas import (
    BrewprintIn, BrewprintOut, BrewprintStatus, BrewResultIn, BrewStep, Recipe,
)
from brewprint_backend.app.services.brewing.errors import RecipeNotFound
from brewprint_backend.app.utils.logs import get_logger

log = get_logger("recipes")

__all__ = ["RecipeLookup", "SqlRecipeStore", "record_to_recipe", "record_to_out"]


class RecipeLookup(Protocol):
    """What the brewing engine needs from recipe storage."""
    def fetch_recipe_by_id(self, recipe_id: str) -> Recipe: ...


# What it does:
# Turn a stored brewprint row into the immutable Recipe a session runs.
# A missing total_time falls back to DEFAULT_TOTAL_TIME_S (4 minutes).
def record_to_recipe(row: BrewprintRecord) -> Recipe:
    params: Dict[str, Any] = dict(row.parameters or {})
    total = params.get("total_time") or DEFAULT_TOTAL_TIME_S
    return Recipe(
        id=row.id,
        name=row.name,
        method=row.method,
        steps=[BrewStep(**s) for s in (row.steps or [])],
        target_total_time=float(total),
        coffee_amount=float(params.get("coffee_grams") or 0),
        water_amount=float(params.get("water_grams") or 0),
        water_temp=params.get("water_temp"),
    )

def record_to_out(row: BrewprintRecord) -> BrewprintOut:
    return BrewprintOut(
        id=row.id,
        name=row.name,
        description=row.description,
        method=row.method,
        difficulty=row.difficulty,
        status=BrewprintStatus(row.status),
        parameters=dict(row.parameters or {}),
        steps=[BrewStep(**s) for s in (row.steps or [])],
        rating=row.rating,
        brewing_notes=row.brewing_notes,
        tasting_notes=row.tasting_notes,
        actual_metrics=row.actual_metrics,
        brew_date=row.brew_date,
    )


class SqlRecipeStore:
    """
    SQLModel-backed brewprint storage. Implements RecipeLookup.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # -------- lookup --------
    def fetch_recipe_by_id(self, recipe_id: str) -> Recipe:
        return record_to_recipe(self._get_row(recipe_id))

    def get_brewprint(self, recipe_id: str) -> BrewprintOut:
        return record_to_out(self._get_row(recipe_id))

    def list_brewprints(self, method: Optional[str] = None) -> List[BrewprintOut]:
        with Session(self._engine) as session:
            stmt = select(BrewprintRecord)
            if method:
                stmt = stmt.where(BrewprintRecord.method == method)
            rows = session.exec(stmt.order_by(BrewprintRecord.created_at.desc())).all()
            return [record_to_out(r) for r in rows]

    def find_by_name(self, name: str) -> Optional[BrewprintOut]:
        with Session(self._engine) as session:
            row = session.exec(select(BrewprintRecord).where(BrewprintRecord.name == name)).first()
            return record_to_out(row) if row else None

    # -------- writes --------
    def create_brewprint(self, data: BrewprintIn, recipe_id: Optional[str] = None) -> BrewprintOut:
        row = BrewprintRecord(
            id=recipe_id or str(uuid.uuid4()),
            name=data.name,
            description=data.description,
            method=data.method.value,
            difficulty=data.difficulty,
            status=BrewprintStatus.EXPERIMENTING.value,
            parameters=data.parameters.model_dump(exclude_none=True),
            steps=[s.model_dump(exclude_none=True) for s in data.steps],
        )
        with Session(self._engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            log.info(f"[recipes] created brewprint {row.id} '{row.name}'")
            return record_to_out(row)

    def record_brew_result(self, recipe_id: str, result: BrewResultIn) -> BrewprintOut:
        """
        Store the outcome of a brew on the brewprint. A rating of 4+ marks the
        brewprint final, anything lower keeps it experimenting.
        """
        with Session(self._engine) as session:
            row = session.get(BrewprintRecord, recipe_id)
            if row is None:
                raise RecipeNotFound(recipe_id)
            row.rating = int(result.rating)
            row.brewing_notes = result.brewing_notes
            row.tasting_notes = list(result.tasting_notes)
            row.actual_metrics = result.actual_metrics.model_dump(exclude_none=True) if result.actual_metrics else None
            row.brew_date = result.brew_date or datetime.now(timezone.utc).isoformat()
            row.status = (BrewprintStatus.FINAL if result.rating >= 4 else BrewprintStatus.EXPERIMENTING).value
            row.updated_at = datetime.now(timezone.utc)
            session.add(row)
            session.commit()
            session.refresh(row)
            log.info(f"[recipes] recorded result for {recipe_id}: rating={row.rating} status={row.status}")
            return record_to_out(row)

    # -------- internals --------
    def _get_row(self, recipe_id: str) -> BrewprintRecord:
        with Session(self._engine) as session:
            row = session.get(BrewprintRecord, recipe_id)
            if row is None:
                raise RecipeNotFound(recipe_id)
            return row
