"""Speech parsers for workout logs and post-session feelings."""

from .feeling_parser import FeelingParser, parse_feeling_from_speech
from .models import FeelingResult, ParsedExercise, ParsedWorkoutData
from .speech_parser import SpeechWorkoutParser, parse_workout_speech

__all__ = [
    "FeelingParser",
    "FeelingResult",
    "ParsedExercise",
    "ParsedWorkoutData",
    "SpeechWorkoutParser",
    "parse_feeling_from_speech",
    "parse_workout_speech",
]
