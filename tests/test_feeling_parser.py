"""Tests for parsing how a session felt into a feeling label and RPE."""

import pytest

from workout_speech_api.parsers import parse_feeling_from_speech
from workout_speech_api.parsers.feeling_parser import FEELING_TO_RPE


class TestFeelingWords:
    def test_default_is_okay_without_rpe(self):
        result = parse_feeling_from_speech("")
        assert result.feeling == "okay"
        assert result.rpe is None

    def test_none_input(self):
        result = parse_feeling_from_speech(None)
        assert result.feeling == "okay"
        assert result.rpe is None

    @pytest.mark.parametrize("word", list(FEELING_TO_RPE))
    def test_table_rpe_used(self, word):
        result = parse_feeling_from_speech(f"it was {word}")
        assert result.feeling == word
        assert result.rpe == FEELING_TO_RPE[word]

    def test_table_order_decides(self):
        """'amazing' comes before 'exhausted' in the table."""
        result = parse_feeling_from_speech("amazing but exhausted")
        assert result.feeling == "amazing"
        assert result.rpe == 5

    def test_whole_words_only(self):
        result = parse_feeling_from_speech("hardly a workout")
        assert result.feeling == "okay"
        assert result.rpe is None


class TestExplicitRpe:
    def test_explicit_rpe_wins(self):
        result = parse_feeling_from_speech("felt great, RPE 8")
        assert result.feeling.startswith("great")
        assert result.rpe == 8

    def test_rate_keyword(self):
        result = parse_feeling_from_speech("rate 7, felt good")
        assert result.feeling == "good"
        assert result.rpe == 7

    @pytest.mark.parametrize("text", ["heart rate was 150, felt good", "rate was 45, felt good"])
    def test_rate_outside_scale_ignored(self, text):
        result = parse_feeling_from_speech(text)
        assert result.feeling == "good"
        assert result.rpe == 7

    def test_full_phrase_with_large_value_clamped(self):
        assert parse_feeling_from_speech("rate of perceived exertion 12").rpe == 10

    def test_explicit_rpe_without_feeling_word(self):
        result = parse_feeling_from_speech("rpe 6.5")
        assert result.feeling == "okay"
        assert result.rpe == 6.5

    @pytest.mark.parametrize("text,expected", [("rpe 15", 10), ("rpe 0.5", 1)])
    def test_explicit_rpe_clamped(self, text, expected):
        assert parse_feeling_from_speech(text).rpe == expected


class TestQualifiers:
    def test_really_raises_rpe(self):
        result = parse_feeling_from_speech("felt really tired")
        assert result.feeling == "really tired"
        assert result.rpe == 9

    def test_very_capped_at_ten(self):
        result = parse_feeling_from_speech("very brutal")
        assert result.feeling == "really brutal"
        assert result.rpe == 10

    def test_pretty_only_relabels(self):
        result = parse_feeling_from_speech("pretty good")
        assert result.feeling == "pretty good"
        assert result.rpe == 7

    def test_kinda_lowers_rpe(self):
        result = parse_feeling_from_speech("kinda hard")
        assert result.feeling == "kind of hard"
        assert result.rpe == 8.5

    def test_qualifiers_stack(self):
        result = parse_feeling_from_speech("really pretty tired, kind of")
        assert result.feeling == "kind of really pretty tired"
        assert result.rpe == 8.5

    def test_qualifier_without_rpe(self):
        result = parse_feeling_from_speech("kinda meh")
        assert result.feeling == "kind of okay"
        assert result.rpe is None

    def test_every_is_not_very(self):
        result = parse_feeling_from_speech("every set was good")
        assert result.feeling == "good"
        assert result.rpe == 7

    def test_serialization_omits_missing_rpe(self):
        assert parse_feeling_from_speech("meh").to_dict() == {"feeling": "okay"}
