"""Integration tests for HabitDNA.

End-to-end tests that run a raw log through analysis, fingerprinting,
persistence, mutation tracking and compatibility.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from habit_dna.common.exceptions import ValidationError
from habit_dna.data.schemas import HabitEntry
from habit_dna.services import FileFingerprintStore, HabitDNAService

import main as cli


def _raw_log(days, category="exercise", value=20, start=None):
    """Loosely-typed documents as the log store would return them."""
    start = start or datetime(2026, 1, 1, 7, 0, tzinfo=timezone.utc)
    return [
        {
            "category": category,
            "value": str(value),
            "unit": "minutes",
            "timestamp": (start + timedelta(days=d)).isoformat(),
        }
        for d in range(days)
    ]


class TestHabitDNAFlowIntegration:
    """Integration tests for the regenerate flow."""
    
    @pytest.fixture
    def service(self, tmp_path, settings):
        """Create a service backed by a file store."""
        return HabitDNAService(store=FileFingerprintStore(tmp_path), settings=settings)
    
    def test_full_lifecycle(self, service, tmp_path):
        steady = [HabitEntry.model_validate(doc) for doc in _raw_log(25)]
        
        first = service.regenerate("user_a", steady)
        
        # Daily rhythm, one category, constant values, flat growth
        assert first.fingerprint.component_vector.as_tuple() == (100, 14, 100, 100, 50)
        assert first.fingerprint.sequence.startswith("F2FF8")
        assert (tmp_path / "user_a.json").exists()
        
        noisy = steady[:3] + [
            HabitEntry(category="mood", value="bad", timestamp=None),
            HabitEntry(category="screen", value=400, timestamp="2026-01-02T23:00:00Z"),
            HabitEntry(category="stress", value=1, timestamp="2026-01-03T01:00:00Z"),
        ]
        second = service.regenerate("user_a", noisy)
        
        assert second.revision == 2
        assert len(second.mutations) == 1
        assert second.mutations[0].previous_sequence == first.fingerprint.sequence
        
        stored = json.loads((tmp_path / "user_a.json").read_text())
        assert stored["revision"] == 2
        assert stored["mutations"][0]["kind"] == "major_change"
    
    def test_compatibility_across_users(self, service):
        service.regenerate("user_a", [HabitEntry.model_validate(d) for d in _raw_log(5)])
        service.regenerate(
            "user_b", [HabitEntry.model_validate(d) for d in _raw_log(5, category="sleep")]
        )
        
        result = service.compatibility("user_a", "user_b")
        
        # Same shape of log in a different category: identical vectors
        assert result.score == 100
        assert len(result.factors) == 5


class TestCommandLine:
    
    def test_prints_fingerprint(self, tmp_path, capsys, monkeypatch):
        for key in ["HABIT_DNA_ENVIRONMENT", "HABIT_DNA_LOG_LEVEL", "HABIT_DNA_DEBUG"]:
            monkeypatch.delenv(key, raising=False)
        log_file = tmp_path / "entries.json"
        log_file.write_text(json.dumps([
            {"category": "exercise", "value": 10, "timestamp": "2026-01-01T07:00:00Z"},
            {"category": "exercise", "value": 20, "timestamp": "2026-01-02T07:00:00Z"},
        ]))
        
        assert cli.main([str(log_file)]) == 0
        
        output = json.loads(capsys.readouterr().out)
        assert output["sequence"] == "F2BF86D2EC903"
        assert len(output["visual_pattern"]) == 20
    
    def test_non_list_input_is_rejected(self, tmp_path, capsys):
        log_file = tmp_path / "entries.json"
        log_file.write_text(json.dumps({"category": "exercise"}))
        
        assert cli.main([str(log_file)]) == 1
        
        error = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert error["error"] == "VALIDATION_ERROR"
        assert error["details"]["found"] == "dict"
    
    def test_unreadable_input_is_rejected(self, tmp_path, capsys):
        log_file = tmp_path / "entries.json"
        log_file.write_text("[not json")
        
        assert cli.main([str(log_file)]) == 1
        
        assert "VALIDATION_ERROR" in capsys.readouterr().err
    
    def test_load_entries_rejects_non_object_items(self, tmp_path):
        log_file = tmp_path / "entries.json"
        log_file.write_text(json.dumps([5]))
        
        with pytest.raises(ValidationError):
            cli.load_entries(log_file)
