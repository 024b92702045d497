"""
Tests for the voice log session.

A session collects several recordings, lets the user edit or delete parsed
exercises and builds the final workout log.
"""

import pytest

from workout_speech_api.services.voice_log_session import (
    ExerciseNotFoundError,
    VoiceLogSession,
    join_transcript,
)


class TestJoinTranscript:
    def test_final_and_interim(self):
        assert join_transcript("bench 225", "squat 315") == "bench 225 squat 315"

    def test_missing_parts(self):
        assert join_transcript("bench 225") == "bench 225"
        assert join_transcript(None, "  squat 315 ") == "squat 315"
        assert join_transcript(None, None) == ""


class TestAddTranscript:
    def test_blank_recording_ignored(self, session):
        assert session.add_transcript("   ") is None
        assert session.exercises == []
        assert session.last_parse is None

    def test_recordings_accumulate(self, session):
        session.add_transcript("bench 225. note: grip slipping. felt good, rpe 7")
        session.add_transcript("squat 315. note: knees ok. felt tired")

        assert [e.name for e in session.exercises] == ["Bench Press", "Squat"]
        assert session.notes == "grip slipping knees ok"
        assert session.feeling == "tired"
        assert session.rpe == 7

    def test_interim_text_is_parsed(self, session):
        parsed = session.add_transcript("squats, 5 by 5", "at 225")
        assert parsed is not None
        assert parsed.exercises[0].name == "Squat"
        assert parsed.exercises[0].weight == 225


class TestEditDelete:
    def test_edit_replaces_by_id(self, session):
        session.add_transcript("bench 225")
        original = session.exercises[0]
        updated = original.model_copy(update={"weight": 235.0})

        session.edit_exercise(updated)

        assert len(session.exercises) == 1
        assert session.exercises[0].id == original.id
        assert session.exercises[0].weight == 235

    def test_delete_by_id(self, session):
        session.add_transcript("bench 225, squat 315")
        bench_id = session.exercises[0].id

        session.delete_exercise(bench_id)

        assert [e.name for e in session.exercises] == ["Squat"]

    def test_unknown_id(self, session):
        session.add_transcript("bench 225")
        with pytest.raises(ExerciseNotFoundError):
            session.delete_exercise("missing")
        with pytest.raises(KeyError):
            session.edit_exercise(session.exercises[0].model_copy(update={"id": "missing"}))


class TestFinalize:
    def test_empty_session(self, session):
        result = session.finalize()
        assert result.exercises == []
        assert result.confidence == pytest.approx(0.5)
        assert result.feeling is None
        assert result.notes is None

    def test_uses_last_parse_metadata(self, session):
        session.add_transcript("4 sets of 10 reps at 135 pounds on bench press")
        session.add_transcript("ran 3 miles in 24 minutes, trained for 50 minutes")

        result = session.finalize()

        assert [e.name for e in result.exercises] == ["Bench Press", "Running"]
        assert result.duration == 50
        assert result.confidence == pytest.approx(0.65)

    def test_set_feeling_overrides(self, session):
        session.add_transcript("bench 225, felt great, rpe 6")
        session.set_feeling("felt really tired")

        result = session.finalize()

        assert result.feeling == "really tired"
        assert result.rpe == 9
