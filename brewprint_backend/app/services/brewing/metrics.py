# brewprint_backend/app/services/brewing/metrics.py
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from brewprint_backend.app.schemas import Recipe, SessionMetrics, SessionPhase, SessionSnapshot

__all__ = [
    "overall_progress", "step_progress", "ratio", "precision",
    "format_time", "status_text", "compute_metrics",
]

# Pure functions only. Everything here can be recomputed from a serialized
# SessionSnapshot + Recipe.

def _round_half_up(value: float, ndigits: int = 0) -> float:
    q = Decimal(1).scaleb(-ndigits)
    return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP))

def _usable_target(target_total_time: Optional[float]) -> bool:
    return target_total_time is not None and math.isfinite(target_total_time) and target_total_time > 0

def overall_progress(elapsed_seconds: float, target_total_time: Optional[float]) -> float:
    """Percent of the target time used, capped at 100; 0 without a target."""
    if not _usable_target(target_total_time):
        return 0.0
    frac = max(0.0, float(elapsed_seconds)) / float(target_total_time)
    return min(frac, 1.0) * 100.0

def step_progress(current_step_index: int, step_count: int) -> float:
    if current_step_index < 0 or step_count <= 0:
        return 0.0
    return min(current_step_index + 1, step_count) / step_count * 100.0

def ratio(water_amount: float, coffee_amount: float) -> str:
    """Water-to-coffee ratio, e.g. 320g / 20g -> "1:16.0"."""
    if not (math.isfinite(coffee_amount) and math.isfinite(water_amount)) or coffee_amount <= 0:
        return "1:0.0"
    return f"1:{_round_half_up(water_amount / coffee_amount, 1):.1f}"

def precision(elapsed_seconds: float, target_total_time: Optional[float]) -> int:
    """
    0-100 score for how close the finished time landed to the target.
    Perfect (100) without a usable (positive, finite) target; floors at 0 for large overruns.
    """
    if not _usable_target(target_total_time):
        return 100
    miss = abs(float(elapsed_seconds) - float(target_total_time)) * 100.0 / float(target_total_time)
    return int(max(0, 100 - int(_round_half_up(miss))))

def format_time(seconds: float) -> str:
    s = max(0, int(seconds))
    return f"{s // 60:02d}:{s % 60:02d}"

def status_text(phase: SessionPhase, is_running: bool) -> str:
    if phase == SessionPhase.ACTIVE:
        return "Brewing in progress" if is_running else "Brewing paused"
    if phase == SessionPhase.COMPLETE:
        return "Brewing complete"
    return "Ready to brew"

def compute_metrics(snapshot: SessionSnapshot, recipe: Recipe) -> SessionMetrics:
    done = snapshot.phase == SessionPhase.COMPLETE
    return SessionMetrics(
        overall_progress=overall_progress(snapshot.elapsed_seconds, recipe.target_total_time),
        step_progress=step_progress(snapshot.current_step_index, len(recipe.steps)),
        ratio=ratio(recipe.water_amount, recipe.coffee_amount),
        precision=precision(snapshot.elapsed_seconds, recipe.target_total_time) if done else None,
        elapsed_display=format_time(snapshot.elapsed_seconds),
        status_text=status_text(snapshot.phase, snapshot.is_running),
    )
