"""
Voice log endpoints

POST /voice/parse-workout turns a finished recording's transcript into
editable exercise cards; POST /voice/parse-feeling handles the short
"how did it feel" answer. Both are stateless and never touch storage.
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from workout_speech_api import __version__
from workout_speech_api.config import settings
from workout_speech_api.parsers import parse_feeling_from_speech, parse_workout_speech
from workout_speech_api.services.voice_log_session import join_transcript

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------

class ParseWorkoutSpeechRequest(BaseModel):
    """Request model for POST /voice/parse-workout"""
    text: str = Field(..., description="Transcript of the recording")
    interim: str | None = Field(default=None, description="Interim text captured when recording stopped")


class ParseFeelingRequest(BaseModel):
    """Request model for POST /voice/parse-feeling"""
    text: str = Field(..., max_length=1000, description="Short answer about how the session felt")


def _check_length(text: str) -> None:
    if len(text) > settings.MAX_TRANSCRIPT_CHARS:
        logger.warning(
            f"Rejected transcript of {len(text)} chars (max {settings.MAX_TRANSCRIPT_CHARS})"
        )
        raise HTTPException(
            status_code=413,
            detail=f"Transcript exceeds {settings.MAX_TRANSCRIPT_CHARS} characters",
        )


# ---------------------------------------------------------------------------
# Version / health
# ---------------------------------------------------------------------------


@router.get("/version")
def get_version():
    """Get API version information."""
    return {"service": "workout-speech-api", "version": __version__}


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Voice parsing
# ---------------------------------------------------------------------------


@router.post("/voice/parse-workout")
def parse_workout(request: ParseWorkoutSpeechRequest) -> JSONResponse:
    """
    Parse a spoken workout log into exercise cards for the user to confirm.

    ## Response
    - **exercises**: parsed exercises, fields omitted when not stated
    - **duration**, **feeling**, **rpe**, **notes**: session metadata when present
    - **confidence**: 0-1 heuristic, 0.1 when nothing was recognized
    - **needs_review**: True when confidence is too low to auto-accept
    """
    text = join_transcript(request.text, request.interim)
    _check_length(text)

    parsed = parse_workout_speech(text)
    body: dict[str, Any] = parsed.to_dict()
    body["needs_review"] = parsed.needs_review(settings.AUTO_ACCEPT_CONFIDENCE)
    return JSONResponse(body)


@router.post("/voice/parse-feeling")
def parse_feeling(request: ParseFeelingRequest) -> JSONResponse:
    """Parse how a session felt into a feeling label and optional RPE."""
    return JSONResponse(parse_feeling_from_speech(request.text).to_dict())
