# schemas.py  (brewprints, brewing sessions, results)

from __future__ import annotations
from enum import Enum
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, ConfigDict, conint, confloat, field_validator


# ===================== Enums =====================

class Technique(str, Enum):
    # Known pour styles; BrewStep.technique stays a free-form string.
    CIRCULAR = "circular"
    CENTER_POUR = "center-pour"
    AGITATE = "agitate"
    SPIRAL = "spiral"
    BLOOM = "bloom"
    IMMERSION = "immersion"

class BrewMethod(str, Enum):
    V60 = "v60"
    CHEMEX = "chemex"
    FRENCH_PRESS = "french-press"
    AEROPRESS = "aeropress"
    ESPRESSO = "espresso"
    COLD_BREW = "cold-brew"
    SIPHON = "siphon"
    PERCOLATOR = "percolator"
    TURKISH = "turkish"
    MOKA = "moka"

class BrewprintStatus(str, Enum):
    EXPERIMENTING = "experimenting"
    FINAL = "final"
    ARCHIVED = "archived"

class SessionPhase(str, Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    COMPLETE = "complete"


# ===================== Recipe (immutable for a session) =====================

def _ordered_steps(steps: List["BrewStep"]) -> List["BrewStep"]:
    # Steps may arrive in any order, but their `order` values must be 1..n.
    ordered = sorted(steps, key=lambda s: s.order)
    got = [s.order for s in ordered]
    if got != list(range(1, len(ordered) + 1)):
        raise ValueError(f"step orders must run 1..{len(ordered)} without gaps or duplicates, got {got}")
    return ordered

class BrewStep(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    order: conint(ge=1)
    title: str
    description: str = ""
    duration: confloat(ge=0) = 0           # seconds, informational
    water_amount: confloat(ge=0) = 0       # grams poured during this step
    technique: str = ""                    # see Technique; not validated
    temperature: Optional[float] = None    # if different from the main temp

class Recipe(BaseModel):
    """
    What a brewing session runs. coffee/water positivity (and finiteness) and
    a non-empty step list are checked when the session starts, not here, so a bad recipe can
    still be handed to the engine and rejected there.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[str] = None
    name: str = "Untitled brewprint"
    method: str = "v60"
    steps: List[BrewStep] = Field(default_factory=list)
    target_total_time: Optional[confloat(ge=0)] = None
    coffee_amount: float
    water_amount: float
    water_temp: Optional[float] = None

    @field_validator("steps")
    @classmethod
    def _sort_steps(cls, v: List[BrewStep]) -> List[BrewStep]:
        return _ordered_steps(v)


# ===================== Stored brewprints (recipe-storage collaborator) =====================

class BrewParameters(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    coffee_grams: confloat(gt=0)
    water_grams: confloat(gt=0)
    water_temp: confloat(ge=0, le=100) = 93
    grind_setting: Optional[float] = None
    bloom_time: Optional[confloat(ge=0)] = None   # seconds
    total_time: Optional[confloat(ge=0)] = None   # seconds
    ratio: Optional[str] = None                   # e.g. "1:16"

class BrewprintIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    description: Optional[str] = None
    method: BrewMethod = BrewMethod.V60
    difficulty: conint(ge=1, le=3) = 1
    parameters: BrewParameters
    steps: List[BrewStep] = Field(default_factory=list)

    @field_validator("steps")
    @classmethod
    def _check_steps(cls, v: List[BrewStep]) -> List[BrewStep]:
        return _ordered_steps(v)

class ActualMetrics(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    tds: Optional[confloat(gt=0)] = None
    extraction_yield: Optional[confloat(gt=0)] = None

class BrewResultIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rating: conint(ge=1, le=5)
    brewing_notes: str = ""
    tasting_notes: List[str] = Field(default_factory=list)
    actual_metrics: Optional[ActualMetrics] = None
    brew_date: Optional[str] = None   # ISO timestamp, defaults to now

class BrewprintOut(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    method: str
    difficulty: int
    status: BrewprintStatus
    parameters: Dict[str, Any]
    steps: List[BrewStep]
    rating: Optional[int] = None
    brewing_notes: Optional[str] = None
    tasting_notes: Optional[List[str]] = None
    actual_metrics: Optional[Dict[str, Any]] = None
    brew_date: Optional[str] = None


# ===================== Session state & metrics =====================

class SessionSnapshot(BaseModel):
    session_id: str
    recipe_id: Optional[str] = None
    phase: SessionPhase
    current_step_index: int
    elapsed_seconds: conint(ge=0)
    is_running: bool
    current_step: Optional[BrewStep] = None

class SessionMetrics(BaseModel):
    overall_progress: confloat(ge=0, le=100)
    step_progress: confloat(ge=0, le=100)
    ratio: str
    precision: Optional[conint(ge=0, le=100)] = None   # only once complete
    elapsed_display: str                              # "MM:SS"
    status_text: str

class BrewingStateOut(BaseModel):
    ok: bool = True
    session: SessionSnapshot
    metrics: SessionMetrics
    message: Optional[str] = None
