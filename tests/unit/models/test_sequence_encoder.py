"""Unit tests for SequenceEncoder."""

import re

import pytest

from habit_dna.data.schemas import ComponentVector
from habit_dna.models.dna.encoder import SequenceEncoder


HEX13 = re.compile(r"^[0-9A-F]{13}$")


@pytest.fixture
def encoder():
    return SequenceEncoder()


class TestSequenceEncoderHappyPath:
    
    def test_daily_exercise_vector(self, encoder, daily_exercise_vector):
        """Prefix F2BF8 plus the hash of the canonical payload."""
        assert encoder.prefix(daily_exercise_vector) == "F2BF8"
        assert encoder.encode(daily_exercise_vector) == "F2BF86D2EC903"
    
    def test_zero_vector(self, encoder):
        assert encoder.encode(ComponentVector.zero()) == "000004BA96A2B"
    
    def test_canonical_serialization(self, encoder, daily_exercise_vector):
        assert encoder.serialize(daily_exercise_vector) == (
            '{"consistency":100,"diversity":14,"intensity":75,"balance":100,"growth":50}'
        )
    
    def test_fractional_values_keep_their_decimals(self, encoder):
        vector = ComponentVector(consistency=12.5)
        
        assert encoder.serialize(vector).startswith('{"consistency":12.5,')
        assert encoder.suffix(vector) == "54A7EC95"
    
    def test_repeated_calls_are_identical(self, encoder, mid_vector):
        assert encoder.encode(mid_vector) == encoder.encode(mid_vector)
        assert SequenceEncoder().encode(mid_vector) == encoder.encode(mid_vector)


class TestSequenceEncoderEdgeCases:
    
    def test_short_hash_is_left_padded(self, encoder):
        """abs(hash) of this payload has only 7 hex digits."""
        vector = ComponentVector(
            consistency=20, diversity=10, intensity=30, balance=40, growth=50
        )
        
        assert encoder.encode(vector) == "325680AB8B64E"
    
    def test_hash_is_order_sensitive(self, encoder):
        a = ComponentVector(consistency=10, diversity=20, intensity=30, balance=40, growth=50)
        b = ComponentVector(consistency=20, diversity=10, intensity=30, balance=40, growth=50)
        
        assert encoder.encode(a) == "235684D9BA154"
        assert encoder.suffix(a) != encoder.suffix(b)
    
    def test_quantization_rounds_half_away_from_zero(self, encoder):
        """50 -> 7.5 -> 8 and 30 -> 4.5 -> 5."""
        vector = ComponentVector(consistency=50, diversity=30)
        
        assert encoder.prefix(vector)[:2] == "85"
    
    def test_hash32_wraps_to_signed(self, encoder):
        value = encoder.hash32(encoder.serialize(
            ComponentVector(consistency=100, diversity=14, intensity=75, balance=100, growth=50)
        ))
        
        assert value == -1831782659
    
    @pytest.mark.parametrize("values", [
        (0, 0, 0, 0, 0),
        (100, 100, 100, 100, 100),
        (3.3, 99.99, 0.01, 47.5, 52.5),
        (1, 2, 3, 4, 5),
    ])
    def test_sequence_shape(self, encoder, values):
        vector = ComponentVector(**dict(zip(
            ["consistency", "diversity", "intensity", "balance", "growth"], values
        )))
        
        sequence = encoder.encode(vector)
        
        assert len(sequence) == 13
        assert HEX13.match(sequence)
