"""
Feeling Parser

Extracts a mood label and an inferred RPE from a short utterance about how
a session felt ("pretty tired, rpe 8", "kinda brutal").
"""

import logging
import re
from types import MappingProxyType
from typing import Mapping, Optional

from workout_speech_api.utils import clamp, to_float

from .models import FeelingResult

logger = logging.getLogger(__name__)

# Checked in this order; the first word present sets the label
FEELING_TO_RPE: Mapping[str, float] = MappingProxyType({
    "amazing": 5,
    "fantastic": 5,
    "great": 6,
    "strong": 6,
    "powerful": 6,
    "good": 7,
    "solid": 7,
    "decent": 7,
    "okay": 8,
    "fine": 8,
    "tired": 8.5,
    "hard": 9,
    "difficult": 9,
    "exhausted": 9.5,
    "brutal": 10,
    "terrible": 10,
})

DEFAULT_FEELING = "okay"
QUALIFIER_STEP = 0.5


class FeelingParser:
    """Maps feeling words and qualifiers to a label and RPE"""

    # Bare "rate" only counts for a value on the 1-10 scale
    RPE_PATTERN = re.compile(
        r"\b(?:rate\s+of\s+perceived\s+exertion|rpe)\s*(?:of|was|at|is)?\s*"
        r"(?P<value>\d+(?:\.\d+)?)"
        r"|(?<!heart )\brate\s*(?:of|was|at|is)?\s*(?P<rate>(?:10|[1-9])(?:\.\d+)?)(?!\d)"
    )
    WORD_PATTERNS = tuple(
        (word, re.compile(rf"\b{word}\b"), rpe) for word, rpe in FEELING_TO_RPE.items()
    )
    PRETTY_PATTERN = re.compile(r"\b(?:pretty|fairly)\b")
    REALLY_PATTERN = re.compile(r"\b(?:really|very)\b")
    KIND_OF_PATTERN = re.compile(r"\b(?:kind\s+of|kinda)\b")

    def parse(self, text: Optional[str]) -> FeelingResult:
        normalized = (text or "").lower().strip()
        feeling = DEFAULT_FEELING
        rpe = self._explicit_rpe(normalized)

        for word, pattern, word_rpe in self.WORD_PATTERNS:
            if pattern.search(normalized):
                feeling = word
                if rpe is None:
                    rpe = float(word_rpe)
                break

        # Qualifiers are independent; several can apply
        if self.PRETTY_PATTERN.search(normalized):
            feeling = f"pretty {feeling}"
        if self.REALLY_PATTERN.search(normalized):
            feeling = f"really {feeling}"
            if rpe is not None:
                rpe = min(10.0, rpe + QUALIFIER_STEP)
        if self.KIND_OF_PATTERN.search(normalized):
            feeling = f"kind of {feeling}"
            if rpe is not None:
                rpe = max(1.0, rpe - QUALIFIER_STEP)

        logger.debug(f"Parsed feeling: {feeling!r}, rpe {rpe}")
        return FeelingResult(feeling=feeling, rpe=rpe)

    def _explicit_rpe(self, text: str) -> Optional[float]:
        match = self.RPE_PATTERN.search(text)
        if not match:
            return None
        value = to_float(match.group("value") or match.group("rate"))
        return clamp(value, 1, 10) if value is not None else None


_parser = FeelingParser()


def parse_feeling_from_speech(text: Optional[str]) -> FeelingResult:
    """Parse how a session felt; defaults to "okay" with no RPE."""
    return _parser.parse(text)
