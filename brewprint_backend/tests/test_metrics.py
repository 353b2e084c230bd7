# tests/test_metrics.py
import pytest

from brewprint_backend.app.schemas import SessionPhase, SessionSnapshot
from brewprint_backend.app.services.brewing import (
    compute_metrics, format_time, overall_progress, precision, ratio, status_text, step_progress,
)


@pytest.mark.parametrize("elapsed", [0, 1, 119, 240, 241, 10_000])
@pytest.mark.parametrize("target", [None, 0, 1, 240, 600])
def test_overall_progress_stays_in_bounds(elapsed, target):
    p = overall_progress(elapsed, target)
    assert 0.0 <= p <= 100.0

def test_overall_progress_values():
    assert overall_progress(120, 240) == 50.0
    assert overall_progress(480, 240) == 100.0
    assert overall_progress(50, 0) == 0.0
    assert overall_progress(50, None) == 0.0

def test_step_progress():
    assert step_progress(-1, 3) == 0.0
    assert step_progress(0, 4) == 25.0
    assert step_progress(3, 4) == 100.0

@pytest.mark.parametrize("water,coffee,expected", [
    (320, 20, "1:16.0"),
    (250, 15, "1:16.7"),
    (500, 30, "1:16.7"),
    (225, 15, "1:15.0"),
    (36, 18, "1:2.0"),
    (16.25, 1, "1:16.3"),   # half rounds up
])
def test_ratio(water, coffee, expected):
    assert ratio(water, coffee) == expected

def test_precision_examples():
    assert precision(240, 240) == 100
    assert precision(300, 240) == 75
    assert precision(180, 240) == 75
    assert precision(0, 240) == 0
    assert precision(2000, 240) == 0     # floors, never negative
    assert precision(123, 0) == 100
    assert precision(123, None) == 100

def test_precision_rounds_half_up():
    # 1 s off a 200 s target is 0.5% -> rounds to 1
    assert precision(201, 200) == 99

def test_format_time():
    assert format_time(0) == "00:00"
    assert format_time(65) == "01:05"
    assert format_time(3600) == "60:00"

def test_status_text():
    assert status_text(SessionPhase.NOT_STARTED, False) == "Ready to brew"
    assert status_text(SessionPhase.ACTIVE, True) == "Brewing in progress"
    assert status_text(SessionPhase.ACTIVE, False) == "Brewing paused"
    assert status_text(SessionPhase.COMPLETE, False) == "Brewing complete"

def test_metrics_rederivable_from_serialized_snapshot(recipe):
    snap = SessionSnapshot(
        session_id="s1", recipe_id=recipe.id, phase=SessionPhase.COMPLETE,
        current_step_index=2, elapsed_seconds=300, is_running=False,
    )
    wire = snap.model_dump_json()
    again = SessionSnapshot.model_validate_json(wire)
    assert compute_metrics(again, recipe) == compute_metrics(snap, recipe)
    assert compute_metrics(again, recipe).precision == 75

def test_non_finite_inputs_do_not_raise():
    inf, nan = float("inf"), float("nan")
    assert ratio(inf, 20) == "1:0.0"
    assert ratio(320, nan) == "1:0.0"
    assert precision(240, inf) == 100
    assert precision(240, nan) == 100
    assert overall_progress(120, inf) == 0.0
