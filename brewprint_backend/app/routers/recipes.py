# app/routers/recipes.py
from __future__ import annotations
from typing import Any, Dict, Optional
from fastapi import APIRouter

from brewprint_backend.app.schemas import BrewprintIn, BrewResultIn
from brewprint_backend.app.services.router_helpers import recipes_helpers as H

router = APIRouter(prefix="/recipes", tags=["recipes"])

@router.get("/")
def list_recipes(method: Optional[str] = None) -> Dict[str, Any]:
    return H.list_all(method=method)

@router.get("/{recipe_id}")
def get_recipe(recipe_id: str) -> Dict[str, Any]:
    return H.read_one(recipe_id)

@router.post("/")
def create_recipe(payload: BrewprintIn) -> Dict[str, Any]:
    return H.create_one(payload)

# What it does:
# Record how a brew of this brewprint turned out (rating 1-5, notes, TDS/EY).
@router.post("/{recipe_id}/results")
def post_result(recipe_id: str, result: BrewResultIn) -> Dict[str, Any]:
    return H.record_result(recipe_id, result)
