"""
Test fixtures for workout-speech-api.

Provides a FastAPI TestClient and a fresh voice log session per test.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_speech_api...`
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from workout_speech_api.main import app
from workout_speech_api.services.voice_log_session import VoiceLogSession


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def api_client() -> TestClient:
    """Shared FastAPI TestClient for workout-speech-api."""
    return TestClient(app)


@pytest.fixture
def client(api_client: TestClient) -> TestClient:
    """Per-test alias for the shared TestClient."""
    return api_client


@pytest.fixture
def session() -> VoiceLogSession:
    return VoiceLogSession()

