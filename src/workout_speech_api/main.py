"""Main FastAPI application."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workout_speech_api.api.routes import router
from workout_speech_api.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Workout Speech API")

# Configure CORS to allow requests from the UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
