"""Voice log session: accumulate several recordings into one workout log.

A user may record more than once before submitting ("add more"), then edit
or delete individual parsed exercises. The session keeps that state in
memory and produces the final ParsedWorkoutData on submit.
"""
import logging
from typing import List, Optional

from workout_speech_api.parsers import (
    ParsedExercise,
    ParsedWorkoutData,
    parse_feeling_from_speech,
    parse_workout_speech,
)
from workout_speech_api.parsers.speech_parser import BASE_CONFIDENCE


logger = logging.getLogger(__name__)


class ExerciseNotFoundError(KeyError):
    """Raised when an edit or delete targets an exercise id not in the session."""


def join_transcript(final: Optional[str], interim: Optional[str] = None) -> str:
    """Join the final and still-interim transcript fragments of a recording."""
    return f"{final or ''} {interim or ''}".strip()


class VoiceLogSession:
    """In-memory state for one voice logging flow."""

    def __init__(self) -> None:
        self.exercises: List[ParsedExercise] = []
        self.notes: str = ""
        self.feeling: str = ""
        self.rpe: Optional[float] = None
        self.last_parse: Optional[ParsedWorkoutData] = None

    def add_transcript(self, final: Optional[str], interim: Optional[str] = None) -> Optional[ParsedWorkoutData]:
        """
        Parse one recording and merge it into the session.

        Args:
            final: Finalized transcript text
            interim: Trailing interim text captured when recording stopped

        Returns:
            The parse result for this recording, or None if it was blank
        """
        text = join_transcript(final, interim)
        if not text:
            return None

        parsed = parse_workout_speech(text)
        self.last_parse = parsed
        self.exercises.extend(parsed.exercises)
        if parsed.notes:
            self.notes = f"{self.notes} {parsed.notes}" if self.notes else parsed.notes
        if parsed.feeling:
            self.feeling = parsed.feeling
        if parsed.rpe:
            self.rpe = parsed.rpe

        logger.info(
            f"Voice log session: +{len(parsed.exercises)} exercises "
            f"({len(self.exercises)} total), confidence {parsed.confidence}"
        )
        return parsed

    def set_feeling(self, text: str) -> None:
        """Set feeling and RPE from a short spoken answer."""
        result = parse_feeling_from_speech(text)
        self.feeling = result.feeling
        self.rpe = result.rpe

    def _index_of(self, exercise_id: str) -> int:
        for index, exercise in enumerate(self.exercises):
            if exercise.id == exercise_id:
                return index
        raise ExerciseNotFoundError(exercise_id)

    def edit_exercise(self, updated: ParsedExercise) -> None:
        self.exercises[self._index_of(updated.id)] = updated

    def delete_exercise(self, exercise_id: str) -> None:
        del self.exercises[self._index_of(exercise_id)]

    def finalize(self) -> ParsedWorkoutData:
        """Build the workout log the user confirmed."""
        last = self.last_parse
        return ParsedWorkoutData(
            exercises=list(self.exercises),
            duration=last.duration if last else None,
            feeling=self.feeling or None,
            rpe=self.rpe,
            notes=self.notes or None,
            confidence=(last.confidence if last else None) or BASE_CONFIDENCE,
        )
