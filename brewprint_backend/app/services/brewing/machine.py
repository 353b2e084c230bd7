# brewprint_backend/app/services/brewing/machine.py
from __future__ import annotations

import math
import threading
from typing import Callable, List, Optional

from brewprint_backend.app.schemas import BrewStep, Recipe, SessionPhase, SessionSnapshot
from brewprint_backend.app.utils.logs import get_logger
from brewprint_backend.app.utils.req_id import new_request_id
from .errors import InvalidRecipe, SequenceExhausted
from .sequencer import StepSequencer
from .timer import ElapsedTimer

log = get_logger("session")

__all__ = ["BrewingSession", "validate_recipe", "StepCallback", "CompleteCallback"]

StepCallback = Callable[[int, BrewStep], None]
CompleteCallback = Callable[[SessionSnapshot], None]


def validate_recipe(recipe: Recipe) -> List[str]:
    """Return the reasons a recipe cannot be brewed (empty list if fine)."""
    problems: List[str] = []
    if not recipe.steps:
        problems.append("recipe has no steps")
    if not _positive(recipe.coffee_amount):
        problems.append("coffee_amount must be positive")
    if not _positive(recipe.water_amount):
        problems.append("water_amount must be positive")
    target = recipe.target_total_time
    if target is not None and not math.isfinite(target):
        problems.append("target_total_time must be finite")
    return problems

def _positive(x: Optional[float]) -> bool:
    return x is not None and math.isfinite(x) and x > 0


class BrewingSession:
    """
    Lifecycle of one brewing attempt: not_started -> active -> complete.

    Commands are start(), advance_step(), pause_resume() and reset(). A
    command issued in the wrong phase is ignored (double taps are normal),
    only start() on a bad recipe raises. Commands are serialized behind one
    lock so a threaded host gets single-writer behaviour.

    on_step(index, step) fires whenever a step becomes current (including the
    first one on start). on_complete(snapshot) fires once when the attempt
    completes; reset() re-arms it for the next attempt.
    """

    def __init__(
        self,
        recipe: Recipe,
        timer: Optional[ElapsedTimer] = None,
        on_step: Optional[StepCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self._recipe = recipe
        self._timer = timer or ElapsedTimer()
        self._sequencer = StepSequencer(recipe.steps)
        self._on_step = on_step
        self._on_complete = on_complete
        self._lock = threading.RLock()
        self._phase = SessionPhase.NOT_STARTED
        self._session_id = session_id or new_request_id("brew")
        self._completion_sent = False

    # -------- queries --------
    @property
    def recipe(self) -> Recipe:
        return self._recipe

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def session_id(self) -> str:
        return self._session_id

    def current_step(self) -> Optional[BrewStep]:
        with self._lock:
            return self._sequencer.current_step()

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            running = self._timer.is_running if self._phase == SessionPhase.ACTIVE else False
            return SessionSnapshot(
                session_id=self._session_id,
                recipe_id=self._recipe.id,
                phase=self._phase,
                current_step_index=self._sequencer.index,
                elapsed_seconds=self._timer.elapsed_seconds,
                is_running=running,
                current_step=self._sequencer.current_step(),
            )

    # -------- commands --------
    def start(self) -> None:
        with self._lock:
            if self._phase != SessionPhase.NOT_STARTED:
                log.debug(f"[session {self._session_id}] start ignored in phase {self._phase.value}")
                return
            problems = validate_recipe(self._recipe)
            if problems:
                log.info(f"[session {self._session_id}] rejected recipe {self._recipe.id}: {problems}")
                raise InvalidRecipe(problems, recipe_id=self._recipe.id)

            first = self._sequencer.begin()
            self._timer.start()
            self._phase = SessionPhase.ACTIVE
            log.info(f"[session {self._session_id}] started '{self._recipe.name}' ({len(self._sequencer)} steps)")
            self._emit_step(0, first)

    def advance_step(self) -> None:
        with self._lock:
            if self._phase != SessionPhase.ACTIVE:
                log.debug(f"[session {self._session_id}] advance ignored in phase {self._phase.value}")
                return
            try:
                step = self._sequencer.advance()
            except SequenceExhausted:
                self._complete()
                return
            self._emit_step(self._sequencer.index, step)

    def pause_resume(self) -> None:
        with self._lock:
            if self._phase != SessionPhase.ACTIVE:
                log.debug(f"[session {self._session_id}] pause/resume ignored in phase {self._phase.value}")
                return
            if self._timer.is_running:
                self._timer.pause()
            else:
                self._timer.start()

    def reset(self) -> None:
        with self._lock:
            self._timer.reset()
            self._sequencer.rewind()
            self._phase = SessionPhase.NOT_STARTED
            self._completion_sent = False
            previous, self._session_id = self._session_id, new_request_id("brew")
            log.info(f"[session {previous}] reset -> {self._session_id}")

    # -------- internals --------
    def _complete(self) -> None:
        self._timer.pause()
        self._phase = SessionPhase.COMPLETE
        log.info(f"[session {self._session_id}] complete at {self._timer.elapsed_seconds}s")
        if self._completion_sent or self._on_complete is None:
            return
        self._completion_sent = True
        snap = self.snapshot()
        try:
            self._on_complete(snap)
        except Exception:
            log.exception(f"[session {self._session_id}] completion notifier failed")

    def _emit_step(self, index: int, step: BrewStep) -> None:
        if self._on_step is None:
            return
        try:
            self._on_step(index, step)
        except Exception:
            log.exception(f"[session {self._session_id}] step notifier failed")
