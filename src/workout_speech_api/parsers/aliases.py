"""
Exercise Aliases

Maps the ways people say an exercise out loud to one canonical display name.
"""

import re
from types import MappingProxyType
from typing import Mapping


EXERCISE_ALIASES: Mapping[str, str] = MappingProxyType({
    # Pressing
    "bench press": "Bench Press",
    "bench": "Bench Press",
    "flat bench": "Flat Bench Press",
    "incline bench": "Incline Bench Press",
    "shoulder press": "Shoulder Press",
    "overhead press": "Overhead Press",
    "ohp": "Overhead Press",
    # Squat / hinge
    "squat": "Squat",
    "squats": "Squat",
    "back squat": "Back Squat",
    "front squat": "Front Squat",
    "deadlift": "Deadlift",
    "deadlifts": "Deadlift",
    # Bodyweight
    "push-up": "Push-ups",
    "push-ups": "Push-ups",
    "push up": "Push-ups",
    "push ups": "Push-ups",
    "pushup": "Push-ups",
    "pushups": "Push-ups",
    "pull-up": "Pull-ups",
    "pull-ups": "Pull-ups",
    "pull up": "Pull-ups",
    "pull ups": "Pull-ups",
    "pullup": "Pull-ups",
    "pullups": "Pull-ups",
    "chin-up": "Chin-ups",
    "chin-ups": "Chin-ups",
    "chin up": "Chin-ups",
    "chin ups": "Chin-ups",
    "chinup": "Chin-ups",
    "chinups": "Chin-ups",
    "burpee": "Burpees",
    "burpees": "Burpees",
    "lunge": "Lunges",
    "lunges": "Lunges",
    "plank": "Plank",
    "dip": "Dips",
    "dips": "Dips",
    "crunch": "Crunches",
    "crunches": "Crunches",
    "sit-up": "Sit-ups",
    "sit-ups": "Sit-ups",
    "sit up": "Sit-ups",
    "sit ups": "Sit-ups",
    "situp": "Sit-ups",
    "situps": "Sit-ups",
    # Pulling
    "curl": "Bicep Curls",
    "curls": "Bicep Curls",
    "bicep curl": "Bicep Curls",
    "bicep curls": "Bicep Curls",
    "row": "Rows",
    "rows": "Rows",
    "bent over row": "Bent Over Rows",
    "barbell row": "Barbell Rows",
    "dumbbell row": "Dumbbell Rows",
    "lat pulldown": "Lat Pulldown",
    # Machines / isolation
    "cable fly": "Cable Flyes",
    "leg press": "Leg Press",
    "leg curl": "Leg Curls",
    "leg extension": "Leg Extensions",
    "calf raise": "Calf Raises",
    "calf raises": "Calf Raises",
    "tricep extension": "Tricep Extensions",
    "tricep pushdown": "Tricep Pushdowns",
    # Cardio
    "run": "Running",
    "ran": "Running",
    "running": "Running",
    "jog": "Running",
    "jogging": "Running",
})

# Spoken filler that can precede an exercise name in a transcript
FILLER_WORDS = frozenset({
    "i", "did", "do", "then", "and", "also", "next", "some", "my", "the", "a",
    "after", "that",
})

_WHITESPACE = re.compile(r"\s+")


def strip_filler(name: str) -> str:
    """Drop leading filler words ("then i did bench" -> "bench", "i did" -> "")."""
    words = name.split()
    while words and words[0].lower() in FILLER_WORDS:
        words.pop(0)
    return " ".join(words)


def capitalize_words(name: str) -> str:
    """Title-case each space separated word, lowering the rest of the word."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" "))


def is_known_exercise(name: str) -> bool:
    return _WHITESPACE.sub(" ", name.strip().lower()) in EXERCISE_ALIASES


def normalize_exercise_name(name: str) -> str:
    """
    Resolve a spoken exercise name to its canonical label.

    Unknown names fall back to word-by-word title case.
    """
    cleaned = _WHITESPACE.sub(" ", name.strip())
    return EXERCISE_ALIASES.get(cleaned.lower()) or capitalize_words(cleaned)
