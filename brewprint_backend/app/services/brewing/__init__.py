# brewprint_backend/app/services/brewing/__init__.py
"""
Brewing session engine.

    from brewprint_backend.app.services.brewing import (
        BrewingSession, ElapsedTimer, StepSequencer,
        InvalidRecipe, RecipeNotFound,
        compute_metrics, precision, ratio,
    )
"""

from __future__ import annotations

# ---- Errors ----
from .errors import BrewingError, InvalidRecipe, RecipeNotFound, SequenceExhausted  # noqa: F401

# ---- Timer / sequencer / state machine ----
from .timer import ElapsedTimer, Scheduler, ThreadingScheduler  # noqa: F401
from .sequencer import StepSequencer  # noqa: F401
from .machine import BrewingSession, validate_recipe  # noqa: F401

# ---- Metrics ----
from .metrics import (  # noqa: F401
    overall_progress,
    step_progress,
    ratio,
    precision,
    format_time,
    status_text,
    compute_metrics,
)

__all__ = [
    # errors
    "BrewingError", "InvalidRecipe", "RecipeNotFound", "SequenceExhausted",
    # engine
    "ElapsedTimer", "Scheduler", "ThreadingScheduler", "StepSequencer",
    "BrewingSession", "validate_recipe",
    # metrics
    "overall_progress", "step_progress", "ratio", "precision",
    "format_time", "status_text", "compute_metrics",
]
