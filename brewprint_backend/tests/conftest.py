from __future__ import annotations
import os
import tempfile
from pathlib import Path

# --- Data tree + DB override (must happen before the app is imported) ---
_TMP_ROOT = Path(tempfile.mkdtemp(prefix="brewprint_tests_"))
os.environ["DATA_DIR"] = str(_TMP_ROOT / "data")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_ROOT / 'brewprint_test.sqlite3'}"

import pytest
from fastapi.testclient import TestClient
from brewprint_backend.app.main import app
from brewprint_backend.app.schemas import BrewStep, Recipe
from brewprint_backend.app.services.brewing import BrewingSession, ElapsedTimer
from brewprint_backend.app.services.router_helpers import brewing_helpers


# --- Deterministic tick source (stands in for threading.Timer) ---
class FakeTick:
    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

class ManualScheduler:
    """
    Runs scheduled callbacks only when the test calls advance(seconds).
    Cancelled ticks are kept around so tests can fire them late on purpose.
    """
    def __init__(self):
        self.now = 0.0
        self.ticks: list[FakeTick] = []

    def schedule(self, delay_s, callback):
        t = FakeTick(self.now + delay_s, callback)
        self.ticks.append(t)
        return t

    def pending(self):
        return [t for t in self.ticks if not t.cancelled]

    def advance(self, seconds: float):
        target = self.now + seconds
        while True:
            due = [t for t in self.pending() if t.due <= target + 1e-9]
            if not due:
                break
            t = min(due, key=lambda x: x.due)
            self.ticks.remove(t)
            self.now = t.due
            t.callback()
        self.now = target

    def fire_cancelled(self):
        """Simulate ticks that were already in flight when they got cancelled."""
        stale = [t for t in self.ticks if t.cancelled]
        for t in stale:
            self.ticks.remove(t)
            t.callback()
        return len(stale)


@pytest.fixture
def scheduler():
    return ManualScheduler()

@pytest.fixture
def timer(scheduler):
    return ElapsedTimer(scheduler, interval_s=1.0)

# --- Recipes ---
def make_recipe(n_steps: int = 3, target: float | None = 240, coffee: float = 20, water: float = 320) -> Recipe:
    steps = [
        BrewStep(order=i + 1, title=f"Step {i + 1}", description="pour", duration=60,
                 water_amount=water / max(n_steps, 1), technique="spiral")
        for i in range(n_steps)
    ]
    return Recipe(id="r-test", name="Test V60", steps=steps,
                  target_total_time=target, coffee_amount=coffee, water_amount=water)

@pytest.fixture
def recipe_factory():
    return make_recipe

@pytest.fixture
def recipe():
    """3 steps, 240 s target, 20 g coffee / 320 g water."""
    return make_recipe()

@pytest.fixture
def completions():
    return []

@pytest.fixture
def session(recipe, timer, completions):
    return BrewingSession(recipe, timer=timer, on_complete=completions.append)

# --- API client ---
@pytest.fixture(scope="session")
def client():
    return TestClient(app)

@pytest.fixture
def hub(scheduler):
    """The process-wide hub, driven by the manual scheduler for the test."""
    h = brewing_helpers.hub
    previous = h.scheduler
    h.scheduler = scheduler
    h.unload()
    yield h
    h.unload()
    h.scheduler = previous
