# brewprint_backend/app/services/brewing/sequencer.py
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from brewprint_backend.app.schemas import BrewStep
from .errors import SequenceExhausted

__all__ = ["StepSequencer"]

# What it does:
# Holds the recipe's steps (sorted by `order`, never mutated) and a cursor.
# The cursor is -1 until begin(); advance() refuses to move past the last step.
class StepSequencer:
    def __init__(self, steps: Iterable[BrewStep]) -> None:
        self._steps: Tuple[BrewStep, ...] = tuple(sorted(steps, key=lambda s: s.order))
        self._index = -1

    @property
    def steps(self) -> Tuple[BrewStep, ...]:
        return self._steps

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._steps)

    def current_step(self) -> Optional[BrewStep]:
        if self._index < 0:
            return None
        return self._steps[self._index]

    def has_next(self) -> bool:
        return self._index < len(self._steps) - 1

    def begin(self) -> BrewStep:
        """Point the cursor at the first step. Caller guarantees steps exist."""
        self._index = 0
        return self._steps[0]

    def advance(self) -> BrewStep:
        if not self.has_next():
            raise SequenceExhausted(f"no step after index {self._index}")
        self._index += 1
        return self._steps[self._index]

    def rewind(self) -> None:
        self._index = -1
