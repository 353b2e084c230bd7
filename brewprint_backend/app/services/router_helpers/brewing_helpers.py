# brewprint_backend/app/services/router_helpers/brewing_helpers.py
from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from fastapi import HTTPException, status

from brewprint_backend.app.library.library_loader import get_technique_labels
from brewprint_backend.app.schemas import (
    BrewingStateOut, BrewStep, SessionSnapshot,
)
from brewprint_backend.app.services.brewing import (
    BrewingSession, ElapsedTimer, InvalidRecipe, RecipeNotFound, Scheduler,
    compute_metrics,
)
from brewprint_backend.app.services.data_stores.recipes import RecipeLookup
from brewprint_backend.app.services.data_stores.sessions import append_session, list_sessions
from brewprint_backend.app.services.router_helpers.recipes_helpers import get_store
from brewprint_backend.app.utils.logs import get_logger

log = get_logger("brewing_helpers")

COMPLETE_MESSAGE = "Brewing complete! Time to taste."


def step_message(index: int, step: BrewStep) -> str:
    """Notification shown when a step becomes current."""
    if index == 0:
        return f"Started: {step.title}"
    return f"Step {index + 1}: {step.title}"


# What it does:
# Keeps the single brewing session of this process and turns engine events
# into short user-facing messages. The completed session is appended to the
# sessions log through the engine's completion notifier.
class SessionHub:
    def __init__(
        self,
        lookup_factory: Callable[[], RecipeLookup],
        scheduler: Optional[Scheduler] = None,
        on_complete: Optional[Callable[[Dict[str, Any]], Any]] = None,
    ) -> None:
        self._lookup_factory = lookup_factory
        self.scheduler = scheduler          # None -> real threading ticks
        self._record = on_complete or append_session
        self._lock = threading.RLock()
        self._session: Optional[BrewingSession] = None
        self._message: Optional[str] = None

    # -------- session lifecycle --------
    def load(self, recipe_id: str) -> BrewingStateOut:
        try:
            recipe = self._lookup_factory().fetch_recipe_by_id(recipe_id)
        except RecipeNotFound as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        with self._lock:
            if self._session is not None:
                # Leaving the old session: stop its timer, no dangling ticks.
                self._session.reset()
            self._session = BrewingSession(
                recipe,
                timer=ElapsedTimer(self.scheduler),
                on_step=self._on_step,
                on_complete=self._on_complete,
            )
            self._message = None
            log.info(f"[hub] loaded recipe {recipe_id} into {self._session.session_id}")
            return self._state()

    def unload(self) -> None:
        with self._lock:
            if self._session is not None:
                self._session.reset()
            self._session = None
            self._message = None

    # -------- commands --------
    def start(self) -> BrewingStateOut:
        def _run(s: BrewingSession) -> None:
            try:
                s.start()
            except InvalidRecipe as e:
                raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
        return self._command(_run)

    def advance(self) -> BrewingStateOut:
        return self._command(lambda s: s.advance_step())

    def pause_resume(self) -> BrewingStateOut:
        return self._command(lambda s: s.pause_resume())

    def reset(self) -> BrewingStateOut:
        return self._command(lambda s: s.reset())

    def state(self) -> BrewingStateOut:
        with self._lock:
            return self._state()

    def history(self, limit: int = 50) -> Dict[str, Any]:
        return {"ok": True, "sessions": list_sessions(limit=limit)}

    # -------- internals --------
    def _command(self, fn: Callable[[BrewingSession], None]) -> BrewingStateOut:
        with self._lock:
            s = self._require()
            self._message = None
            fn(s)
            return self._state()

    def _require(self) -> BrewingSession:
        if self._session is None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="no brewing session loaded")
        return self._session

    def _state(self) -> BrewingStateOut:
        s = self._require()
        snap = s.snapshot()
        return BrewingStateOut(
            session=snap,
            metrics=compute_metrics(snap, s.recipe),
            message=self._message,
        )

    def _on_step(self, index: int, step: BrewStep) -> None:
        label = get_technique_labels().get(step.technique.strip().lower())
        msg = step_message(index, step)
        if label and label.lower() != step.title.strip().lower():
            msg = f"{msg} ({label})"
        self._message = msg

    def _on_complete(self, snap: SessionSnapshot) -> None:
        self._message = COMPLETE_MESSAGE
        s = self._require()
        doc = {
            "session": snap.model_dump(mode="json"),
            "metrics": compute_metrics(snap, s.recipe).model_dump(mode="json"),
            "recipe_name": s.recipe.name,
        }
        self._record(doc)



# ----------------------------------------------------------------------
# Process-wide hub (one active session per invocation)
# ----------------------------------------------------------------------

hub = SessionHub(get_store)
