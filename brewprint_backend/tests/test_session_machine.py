# tests/test_session_machine.py
# Lifecycle of a single brewing attempt: not_started -> active -> complete.
import pytest

from brewprint_backend.app.schemas import SessionPhase
from brewprint_backend.app.services.brewing import (
    BrewingSession, ElapsedTimer, InvalidRecipe, compute_metrics, precision, ratio,
)


def _state(s):
    snap = s.snapshot()
    return (snap.phase, snap.current_step_index, snap.elapsed_seconds, snap.is_running)

def test_fresh_session_is_not_started(session):
    snap = session.snapshot()
    assert snap.phase == SessionPhase.NOT_STARTED
    assert snap.current_step_index == -1
    assert snap.elapsed_seconds == 0
    assert snap.is_running is False
    assert snap.current_step is None

def test_start_moves_to_first_step_and_runs_timer(session, scheduler):
    session.start()
    snap = session.snapshot()
    assert snap.phase == SessionPhase.ACTIVE
    assert snap.current_step_index == 0
    assert snap.is_running is True
    assert snap.current_step.title == "Step 1"
    scheduler.advance(5)
    assert session.snapshot().elapsed_seconds == 5

@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_n_minus_one_advances_then_one_more_completes(recipe_factory, scheduler, n):
    s = BrewingSession(recipe_factory(n_steps=n), timer=ElapsedTimer(scheduler))
    s.start()
    for _ in range(n - 1):
        s.advance_step()
    assert s.phase == SessionPhase.ACTIVE
    assert s.snapshot().current_step_index == n - 1

    s.advance_step()
    snap = s.snapshot()
    assert snap.phase == SessionPhase.COMPLETE
    assert snap.current_step_index == n - 1
    assert snap.is_running is False

def test_completion_freezes_timer_and_notifies_once(session, scheduler, completions):
    session.start()
    scheduler.advance(10)
    for _ in range(3):
        session.advance_step()
    assert session.phase == SessionPhase.COMPLETE
    scheduler.advance(10)
    assert session.snapshot().elapsed_seconds == 10

    # extra taps after completion change nothing and do not re-notify
    session.advance_step()
    session.pause_resume()
    session.start()
    assert len(completions) == 1
    assert completions[0].phase == SessionPhase.COMPLETE
    assert completions[0].elapsed_seconds == 10

def test_start_twice_equals_start_once(session, scheduler):
    session.start()
    once = _state(session)
    session.start()
    assert _state(session) == once
    assert len(scheduler.pending()) == 1

def test_advance_before_start_is_noop(session):
    before = _state(session)
    session.advance_step()
    assert _state(session) == before

def test_pause_resume_only_in_active_phase(session, scheduler):
    session.pause_resume()
    assert _state(session) == (SessionPhase.NOT_STARTED, -1, 0, False)
    scheduler.advance(3)
    assert session.snapshot().elapsed_seconds == 0

def test_pause_resume_twice_restores_running(session, scheduler):
    session.start()
    scheduler.advance(4)
    session.pause_resume()
    snap = session.snapshot()
    assert snap.is_running is False
    assert snap.phase == SessionPhase.ACTIVE
    assert snap.current_step_index == 0
    scheduler.advance(20)
    assert session.snapshot().elapsed_seconds == 4

    session.pause_resume()
    assert session.snapshot().is_running is True
    scheduler.advance(3)
    assert session.snapshot().elapsed_seconds == 7

def test_advance_allowed_while_paused(session, scheduler):
    session.start()
    scheduler.advance(2)
    session.pause_resume()
    session.advance_step()
    snap = session.snapshot()
    assert snap.current_step_index == 1
    assert snap.is_running is False
    assert snap.elapsed_seconds == 2

@pytest.mark.parametrize("advances", [None, 0, 1, 3])
def test_reset_from_any_state(session, scheduler, advances):
    if advances is not None:
        session.start()
        scheduler.advance(9)
        for _ in range(advances):
            session.advance_step()
    session.reset()
    assert _state(session) == (SessionPhase.NOT_STARTED, -1, 0, False)
    assert scheduler.pending() == []
    scheduler.advance(5)
    assert session.snapshot().elapsed_seconds == 0

def test_reset_rearms_completion_and_changes_session_id(session, scheduler, completions):
    first_id = session.session_id
    session.start()
    for _ in range(3):
        session.advance_step()
    session.reset()
    assert session.session_id != first_id

    session.start()
    for _ in range(3):
        session.advance_step()
    assert len(completions) == 2

def test_empty_recipe_rejected_and_stays_not_started(recipe_factory, scheduler):
    s = BrewingSession(recipe_factory(n_steps=0), timer=ElapsedTimer(scheduler))
    with pytest.raises(InvalidRecipe) as exc:
        s.start()
    assert "no steps" in str(exc.value)
    assert _state(s) == (SessionPhase.NOT_STARTED, -1, 0, False)
    assert scheduler.pending() == []

@pytest.mark.parametrize("coffee,water", [(0, 320), (20, 0), (-5, 320)])
def test_non_positive_amounts_rejected(recipe_factory, scheduler, coffee, water):
    s = BrewingSession(recipe_factory(coffee=coffee, water=water), timer=ElapsedTimer(scheduler))
    with pytest.raises(InvalidRecipe):
        s.start()
    assert s.phase == SessionPhase.NOT_STARTED

def test_step_callback_sees_each_step(recipe, timer):
    seen = []
    s = BrewingSession(recipe, timer=timer, on_step=lambda i, step: seen.append((i, step.title)))
    s.start()
    s.advance_step()
    s.advance_step()
    s.advance_step()  # completes, no new step
    assert seen == [(0, "Step 1"), (1, "Step 2"), (2, "Step 3")]

def test_failing_notifier_does_not_break_session(recipe, timer):
    def boom(_snap):
        raise RuntimeError("storage down")
    s = BrewingSession(recipe, timer=timer, on_complete=boom)
    s.start()
    for _ in range(3):
        s.advance_step()
    assert s.phase == SessionPhase.COMPLETE

# --- scenarios with the 3-step, 240 s, 20 g / 320 g recipe ---

def _brew_to(session, scheduler, seconds):
    session.start()
    scheduler.advance(seconds)
    for _ in range(3):
        session.advance_step()
    return session.snapshot()

def test_scenario_on_target(session, scheduler, recipe):
    assert ratio(recipe.water_amount, recipe.coffee_amount) == "1:16.0"
    snap = _brew_to(session, scheduler, 240)
    assert snap.elapsed_seconds == 240
    m = compute_metrics(snap, recipe)
    assert m.precision == 100
    assert m.overall_progress == 100.0
    assert m.step_progress == 100.0
    assert m.status_text == "Brewing complete"

def test_scenario_sixty_seconds_over(session, scheduler, recipe):
    snap = _brew_to(session, scheduler, 300)
    assert precision(snap.elapsed_seconds, recipe.target_total_time) == 75
    assert compute_metrics(snap, recipe).precision == 75

def test_precision_hidden_until_complete(session, scheduler, recipe):
    session.start()
    scheduler.advance(60)
    m = compute_metrics(session.snapshot(), recipe)
    assert m.precision is None
    assert m.overall_progress == 25.0
    assert m.elapsed_display == "01:00"
    assert m.status_text == "Brewing in progress"

@pytest.mark.parametrize("field,bad", [
    ("coffee", float("nan")), ("coffee", float("inf")),
    ("water", float("nan")), ("water", float("inf")),
    ("target", float("nan")), ("target", float("inf")),
])
def test_non_finite_numbers_rejected(recipe_factory, scheduler, field, bad):
    s = BrewingSession(recipe_factory(**{field: bad}), timer=ElapsedTimer(scheduler))
    with pytest.raises(InvalidRecipe):
        s.start()
    assert _state(s) == (SessionPhase.NOT_STARTED, -1, 0, False)
    assert scheduler.pending() == []
