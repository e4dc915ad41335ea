"""Unit tests for MutationTracker."""

from datetime import datetime, timezone

import pytest

from habit_dna.core.types import MutationKind
from habit_dna.data.schemas import ComponentVector, MutationEvent
from habit_dna.models.dna.encoder import SequenceEncoder
from habit_dna.models.dna.mutation import MutationTracker


@pytest.fixture
def tracker():
    return MutationTracker()


class TestMutationTrackerHappyPath:
    
    def test_first_computation_is_never_a_mutation(self, tracker, mid_vector):
        assert tracker.detect(None, mid_vector) is None
    
    def test_large_drift_emits_event(self, tracker, mid_vector, daily_exercise_vector):
        event = tracker.detect(mid_vector, daily_exercise_vector)
        
        assert isinstance(event, MutationEvent)
        assert event.kind == MutationKind.MAJOR_CHANGE
        assert event.previous_sequence == SequenceEncoder().encode(mid_vector)
        assert event.drift == pytest.approx(70 + 16 + 25 + 50 + 50)
    
    def test_description_lists_changed_dimensions(self, tracker):
        previous = ComponentVector(consistency=10, diversity=50)
        current = ComponentVector(consistency=70, diversity=50, growth=5)
        
        event = tracker.detect(previous, current)
        
        assert "consistency +60" in event.description
        assert "growth +5" in event.description
        assert "diversity" not in event.description
    
    def test_explicit_timestamp_is_used(self, tracker):
        when = datetime(2026, 3, 1, tzinfo=timezone.utc)
        
        event = tracker.detect(
            ComponentVector.zero(), ComponentVector(growth=100), timestamp=when
        )
        
        assert event.timestamp == when


class TestMutationTrackerThreshold:
    
    def test_drift_of_exactly_fifty_is_not_a_mutation(self, tracker):
        previous = ComponentVector.zero()
        current = ComponentVector(
            consistency=10, diversity=10, intensity=10, balance=10, growth=10
        )
        
        assert tracker.drift(previous, current) == 50
        assert tracker.detect(previous, current) is None
    
    def test_drift_just_over_fifty_is_a_mutation(self, tracker):
        previous = ComponentVector.zero()
        current = ComponentVector(consistency=50.0001)
        
        assert tracker.detect(previous, current) is not None
    
    def test_drift_counts_decreases_too(self, tracker):
        previous = ComponentVector(intensity=80)
        current = ComponentVector(intensity=20)
        
        event = tracker.detect(previous, current)
        
        assert event is not None
        assert "intensity -60" in event.description
    
    def test_identical_vectors_never_mutate(self, tracker, mid_vector):
        assert tracker.detect(mid_vector, mid_vector) is None
