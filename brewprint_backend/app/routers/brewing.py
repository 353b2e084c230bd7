# app/routers/brewing.py
from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter

from brewprint_backend.app.schemas import BrewingStateOut
from brewprint_backend.app.services.router_helpers import brewing_helpers as H

router = APIRouter(prefix="/brewing", tags=["brewing"])

# What it does:
# Load a brewprint into a fresh, not-started session (replaces any current one).
@router.post("/load/{recipe_id}", response_model=BrewingStateOut)
def load(recipe_id: str) -> BrewingStateOut:
    return H.hub.load(recipe_id)

@router.post("/start", response_model=BrewingStateOut)
def start() -> BrewingStateOut:
    return H.hub.start()

# What it does:
# Next step, or completion when already on the last step.
@router.post("/advance", response_model=BrewingStateOut)
def advance() -> BrewingStateOut:
    return H.hub.advance()

@router.post("/pause-resume", response_model=BrewingStateOut)
def pause_resume() -> BrewingStateOut:
    return H.hub.pause_resume()

@router.post("/reset", response_model=BrewingStateOut)
def reset() -> BrewingStateOut:
    return H.hub.reset()

@router.get("/state", response_model=BrewingStateOut)
def state() -> BrewingStateOut:
    return H.hub.state()

# What it does:
# Completed sessions recorded by the completion notifier, newest first.
@router.get("/history")
def history(limit: int = 50) -> Dict[str, Any]:
    return H.hub.history(limit=limit)
