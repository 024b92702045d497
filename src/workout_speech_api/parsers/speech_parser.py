"""
Speech Workout Parser

Turns a free-form spoken workout log ("4 sets of 10 at 135 on bench, then
ran 3 miles in 24 minutes, felt great, RPE 8") into structured exercises
plus session metadata.

Pattern groups run in a fixed order, each over the whole normalized
transcript. A group never consumes text another group has matched, so the
same phrase can be seen by several groups; the case-insensitive name check
keeps the first record for a given exercise.
"""

import logging
import re
from typing import Iterator, List, Optional

from workout_speech_api.utils import clamp, to_float, to_int

from .aliases import is_known_exercise, normalize_exercise_name, strip_filler
from .models import ParsedExercise, ParsedWorkoutData

logger = logging.getLogger(__name__)

# Words that never start or continue an exercise name
_STOPWORDS = (
    "and", "then", "each", "felt", "feel", "for", "at", "with", "in", "on", "of",
    "got", "to", "by", "x", "rpe", "emom", "reps?", "sets?", "rounds?",
    "minutes?", "mins?", "seconds?", "pounds?", "lbs?", "kg",
)
_WORD = r"(?!(?:%s)\b)[a-z][a-z'-]*" % "|".join(_STOPWORDS)
_NAME = rf"\b{_WORD}(?:\s+{_WORD}){{0,3}}"

_WEIGHT_UNIT = r"(?:pounds?|lbs?|kilograms?|kilos?|kg)\b"
_NUMBER = r"\d+(?:\.\d+)?"

BASE_CONFIDENCE = 0.5
NO_EXERCISE_CONFIDENCE = 0.1
MIN_NAME_LENGTH = 3


class SpeechWorkoutParser:
    """Rule-based parser for spoken workout logs"""

    # "4 sets of 10 reps at 135 pounds on bench press"
    SETS_REPS_WEIGHT_PATTERN = re.compile(
        r"(?P<sets>\d+)\s*(?:sets?\b|x)\s*(?:of\s*)?(?P<reps>\d+)\s*(?:reps?\b)?\s*"
        rf"(?:at|@|with)?\s*(?P<weight>{_NUMBER})\s*"
        rf"(?P<unit>{_WEIGHT_UNIT})?\s*"
        r"(?:(?:on|of|for|doing)\s+)?"
        rf"(?P<name>{_NAME})"
    )

    # "squats, 5 by 5 at 225"
    EXERCISE_FIRST_PATTERN = re.compile(
        rf"(?P<name>{_NAME})\s*,?\s*(?P<sets>\d+)\s*(?:by|x|×)\s*(?P<reps>\d+)\s*"
        rf"(?:at|@|with)?\s*(?P<weight>{_NUMBER})\s*"
        rf"(?P<unit>{_WEIGHT_UNIT})?"
    )

    # "ran 3 miles in 24 minutes"
    CARDIO_PATTERN = re.compile(
        r"\b(?:ran|run|jog|jogged|walked|walk|cycled|biked)\s*"
        rf"(?P<distance>{_NUMBER})\s*(?P<unit>miles?|kilometers?|km|k|meters?|m)\b"
        r"(?:\s*in\s*(?P<minutes>\d+)\s*(?:minutes?|mins?)?\b)?"
    )

    # "did push-ups to failure, got 25 reps, then 20, then 15"
    TO_FAILURE_PATTERN = re.compile(
        rf"(?:\b(?P<did>did)\s+)?(?P<name>{_NAME})(?P<failure>\s+to\s+failure)?\s*,?\s*"
        r"(?:(?P<got>got)\s+)?(?P<r1>\d+)\s*(?P<reps_word>reps?\b)?"
        r"(?:\s*,?\s*(?:then\s+)?(?P<r2>\d+)(?:\s*,?\s*(?:then\s+)?(?P<r3>\d+))?)?"
    )

    # "emom 10 minutes, 5 burpees each minute"
    EMOM_PATTERN = re.compile(
        r"\b(?:emom|every\s+minute\s+on\s+the\s+minute)\s*(?:for\s+)?"
        r"(?P<minutes>\d+)\s*(?:minutes?|mins?)?\s*,?\s*"
        rf"(?P<reps>\d+)\s*(?P<name>{_NAME})(?:\s+each\s+minute)?"
    )

    # "bench 225", "squat at 315 lbs"
    SIMPLE_WEIGHT_PATTERN = re.compile(
        rf"(?P<name>{_NAME})\s*(?:at\s+|@\s*)?(?P<weight>\d{{2,3}})"
        r"(?!\s*(?:reps?|sets?|rounds?|minutes?|mins?|seconds?|secs?|hours?|hrs?|miles?|km|meters?|m)\b)\s*"
        r"(?P<unit>pounds?|lbs?|kg)?(?=[\s,.!?;]|$)"
    )

    DURATION_PATTERN = re.compile(
        r"\b(?:for|total|overall|about|around)\s*(?:of\s+)?(?P<value>\d+)\s*"
        r"(?P<unit>minutes?|mins?|hours?|hrs?)\b"
    )

    RPE_PATTERN = re.compile(
        rf"\b(?:rpe|rate\s+of\s+perceived\s+exertion)\s*(?:of|was|at|is)?\s*(?P<value>{_NUMBER})"
    )

    # First entry that matches wins
    FEELING_PATTERNS = (
        (re.compile(r"\b(?:felt|feel|feels|feeling)\s+(?:great|amazing|awesome|fantastic|strong|powerful)\b"), "great"),
        (re.compile(r"\b(?:felt|feel|feels|feeling)\s+(?:good|nice|solid|decent)\b"), "good"),
        (re.compile(r"\b(?:felt|feel|feels|feeling)\s+(?:okay|ok|alright|fine)\b"), "okay"),
        (re.compile(r"\b(?:felt|feel|feels|feeling)\s+(?:tired|exhausted|fatigued|drained)\b"), "tired"),
        (re.compile(r"\b(?:felt|feel|feels|feeling)\s+(?:bad|rough|terrible|awful|weak)\b"), "struggled"),
        (re.compile(r"\bpretty\s+(?:good|great|solid)\b"), "good"),
        (re.compile(r"\breally\s+(?:good|great|strong)\b"), "great"),
    )

    NOTES_MARKER_PATTERN = re.compile(r"note:|notes:|felt\s+like|thought")
    NOTES_END_PATTERN = re.compile(r"[.!?]|\s{2,}")

    def parse(self, text: Optional[str]) -> ParsedWorkoutData:
        """
        Parse a transcript into structured workout data.

        Never raises: a transcript nothing matches comes back with no
        exercises and a confidence of 0.1.
        """
        normalized = (text or "").lower().strip()
        exercises: List[ParsedExercise] = []
        confidence = BASE_CONFIDENCE

        groups = (
            (self._sets_reps_weight, 0.15),
            (self._exercise_first, 0.15),
            (self._cardio, 0.15),
            (self._to_failure, 0.10),
            (self._emom, 0.10),
            (self._simple_weight, 0.05),
        )
        for extract, step in groups:
            for exercise in extract(normalized, exercises):
                exercises.append(exercise)
                confidence = min(confidence + step, 1.0)

        if not exercises:
            confidence = NO_EXERCISE_CONFIDENCE

        result = ParsedWorkoutData(
            exercises=exercises,
            duration=self._extract_duration(normalized),
            feeling=self._extract_feeling(normalized),
            rpe=self._extract_rpe(normalized),
            notes=self._extract_notes(normalized),
            confidence=round(confidence, 2),
        )
        logger.debug(
            f"Parsed workout speech: {len(exercises)} exercises, confidence {result.confidence}"
        )
        return result

    # ------------------------------------------------------------------
    # Exercise pattern groups
    # ------------------------------------------------------------------

    def _sets_reps_weight(self, text: str, found: List[ParsedExercise]) -> Iterator[ParsedExercise]:
        for match in self.SETS_REPS_WEIGHT_PATTERN.finditer(text):
            name = self._canonical_name(match.group("name"))
            sets = to_int(match.group("sets"))
            weight = to_float(match.group("weight"))
            if not name or sets is None or sets < 1 or weight is None:
                continue
            yield ParsedExercise(
                name=name,
                sets=sets,
                reps=match.group("reps"),
                weight=weight,
                unit=self._weight_unit(match.group("unit")),
            )

    def _exercise_first(self, text: str, found: List[ParsedExercise]) -> Iterator[ParsedExercise]:
        for match in self.EXERCISE_FIRST_PATTERN.finditer(text):
            name = self._canonical_name(match.group("name"))
            if not name or self._already_found(name, found):
                continue
            sets = to_int(match.group("sets"))
            weight = to_float(match.group("weight"))
            if sets is None or sets < 1 or weight is None:
                continue
            yield ParsedExercise(
                name=name,
                sets=sets,
                reps=match.group("reps"),
                weight=weight,
                unit=self._weight_unit(match.group("unit")),
            )

    def _cardio(self, text: str, found: List[ParsedExercise]) -> Iterator[ParsedExercise]:
        # Walking, jogging and cycling are all logged as running for now
        for match in self.CARDIO_PATTERN.finditer(text):
            distance = to_float(match.group("distance"))
            if distance is None:
                continue
            yield ParsedExercise(
                name="Running",
                distance=distance,
                distance_unit=self._distance_unit(match.group("unit")),
                duration=to_int(match.group("minutes")),
            )

    def _to_failure(self, text: str, found: List[ParsedExercise]) -> Iterator[ParsedExercise]:
        for match in self.TO_FAILURE_PATTERN.finditer(text):
            markers = ("did", "failure", "got", "reps_word", "r2")
            if not any(match.group(key) for key in markers):
                continue
            name = self._canonical_name(match.group("name"))
            if len(name) < MIN_NAME_LENGTH or self._already_found(name, found):
                continue
            reps = [to_int(match.group(key)) for key in ("r1", "r2", "r3") if match.group(key)]
            if any(rep is None for rep in reps):
                continue
            yield ParsedExercise(
                name=name,
                sets=len(reps),
                reps=", ".join(str(rep) for rep in reps),
            )

    def _emom(self, text: str, found: List[ParsedExercise]) -> Iterator[ParsedExercise]:
        for match in self.EMOM_PATTERN.finditer(text):
            name = self._canonical_name(match.group("name"))
            minutes = to_int(match.group("minutes"))
            reps = to_int(match.group("reps"))
            if not name or not minutes or reps is None:
                continue
            yield ParsedExercise(
                name=f"EMOM: {name}",
                sets=minutes,
                reps=str(reps),
                duration=minutes,
            )

    def _simple_weight(self, text: str, found: List[ParsedExercise]) -> Iterator[ParsedExercise]:
        for match in self.SIMPLE_WEIGHT_PATTERN.finditer(text):
            spoken = self._known_suffix(match.group("name"))
            if spoken is None:
                continue
            name = normalize_exercise_name(spoken)
            if len(name) < MIN_NAME_LENGTH or self._already_found(name, found):
                continue
            weight = to_float(match.group("weight"))
            if weight is None:
                continue
            yield ParsedExercise(
                name=name,
                weight=weight,
                unit=self._weight_unit(match.group("unit")),
            )

    # ------------------------------------------------------------------
    # Session metadata
    # ------------------------------------------------------------------

    def _extract_duration(self, text: str) -> Optional[int]:
        match = self.DURATION_PATTERN.search(text)
        if not match:
            return None
        value = to_int(match.group("value"))
        if value is None:
            return None
        if match.group("unit").startswith(("hour", "hr")):
            value *= 60
        return value

    def _extract_feeling(self, text: str) -> Optional[str]:
        for pattern, feeling in self.FEELING_PATTERNS:
            if pattern.search(text):
                return feeling
        return None

    def _extract_rpe(self, text: str) -> Optional[float]:
        match = self.RPE_PATTERN.search(text)
        if not match:
            return None
        value = to_float(match.group("value"))
        return clamp(value, 1, 10) if value is not None else None

    def _extract_notes(self, text: str) -> Optional[str]:
        marker = self.NOTES_MARKER_PATTERN.search(text)
        if not marker:
            return None
        tail = text[marker.start():]
        end = self.NOTES_END_PATTERN.search(tail)
        span = tail[:end.start()] if end and end.start() > 0 else tail
        notes = span[len(marker.group(0)):].strip()
        return notes or None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _canonical_name(raw: str) -> str:
        spoken = strip_filler(raw)
        return normalize_exercise_name(spoken) if spoken else ""

    @staticmethod
    def _known_suffix(raw: str) -> Optional[str]:
        """Longest trailing run of words that is a known exercise ("i hit bench" -> "bench")."""
        words = raw.split()
        for start in range(len(words)):
            candidate = " ".join(words[start:])
            if is_known_exercise(candidate):
                return candidate
        return None

    @staticmethod
    def _already_found(name: str, found: List[ParsedExercise]) -> bool:
        lowered = name.lower()
        return any(exercise.name.lower() == lowered for exercise in found)

    @staticmethod
    def _weight_unit(token: Optional[str]) -> str:
        token = (token or "").lower()
        return "kg" if "kg" in token or "kilo" in token else "lbs"

    @staticmethod
    def _distance_unit(token: str) -> str:
        if token.startswith("k"):
            return "km"
        if token.startswith("mile"):
            return "miles"
        return "meters"


_parser = SpeechWorkoutParser()


def parse_workout_speech(text: Optional[str]) -> ParsedWorkoutData:
    """Parse a spoken workout log into structured exercises and session metadata."""
    return _parser.parse(text)
