# tests/test_sequencer.py
import pytest

from brewprint_backend.app.schemas import BrewStep
from brewprint_backend.app.services.brewing import SequenceExhausted, StepSequencer


def _steps():
    # deliberately out of order; `order` decides
    return [
        BrewStep(order=2, title="First Pour", water_amount=150, technique="spiral"),
        BrewStep(order=1, title="Bloom", water_amount=50, technique="bloom"),
        BrewStep(order=3, title="Final Pour", water_amount=120, technique="center-pour"),
    ]

def test_steps_sorted_by_order_and_cursor_starts_before_first():
    seq = StepSequencer(_steps())
    assert [s.title for s in seq.steps] == ["Bloom", "First Pour", "Final Pour"]
    assert seq.index == -1
    assert seq.current_step() is None
    assert seq.has_next() is True

def test_advance_walks_then_signals_exhausted():
    seq = StepSequencer(_steps())
    assert seq.begin().title == "Bloom"
    assert seq.advance().title == "First Pour"
    assert seq.advance().title == "Final Pour"
    assert seq.has_next() is False
    with pytest.raises(SequenceExhausted):
        seq.advance()
    # cursor did not move past the end
    assert seq.index == 2
    assert seq.current_step().title == "Final Pour"

def test_rewind_returns_to_before_start():
    seq = StepSequencer(_steps())
    seq.begin()
    seq.advance()
    seq.rewind()
    assert seq.index == -1
    assert seq.current_step() is None

def test_empty_sequence_has_nothing_next():
    seq = StepSequencer([])
    assert len(seq) == 0
    assert seq.has_next() is False
    with pytest.raises(SequenceExhausted):
        seq.advance()
