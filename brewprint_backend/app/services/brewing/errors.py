# brewprint_backend/app/services/brewing/errors.py
from __future__ import annotations

from typing import List, Optional


class BrewingError(Exception):
    """Base class for brewing-engine errors."""


class InvalidRecipe(BrewingError):
    """
    Raised by BrewingSession.start() when the recipe cannot be brewed:
    no steps, or a non-positive coffee/water amount.
    """
    def __init__(self, problems: List[str], recipe_id: Optional[str] = None) -> None:
        self.problems = list(problems)
        self.recipe_id = recipe_id
        label = f"recipe {recipe_id}" if recipe_id else "recipe"
        super().__init__(f"invalid {label}: {'; '.join(self.problems)}")


class RecipeNotFound(BrewingError):
    """Raised by a recipe lookup when no brewprint has the given id."""
    def __init__(self, recipe_id: str) -> None:
        self.recipe_id = recipe_id
        super().__init__(f"recipe not found: {recipe_id}")


class SequenceExhausted(BrewingError):
    """The sequencer is already on its last step."""
