# models.py  (stored brewprints: target parameters, steps, last recorded result)

from __future__ import annotations
from typing import Optional
from sqlmodel import SQLModel, Field, Column, JSON
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------- Brewprints ----------

class BrewprintRecord(SQLModel, table=True):
    id: str = Field(primary_key=True)
    name: str
    description: Optional[str] = None
    method: str = "v60"                            # enum string
    difficulty: int = 1                            # 1=easy .. 3=advanced
    status: str = "experimenting"                  # experimenting/final/archived
    parameters: dict = Field(default_factory=dict, sa_column=Column(JSON))
    steps: list = Field(default_factory=list, sa_column=Column(JSON))

    # Last brew result (written by record_brew_result)
    rating: Optional[int] = None
    brewing_notes: Optional[str] = None
    tasting_notes: Optional[list] = Field(default=None, sa_column=Column(JSON))
    actual_metrics: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    brew_date: Optional[str] = None

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
