"""Tests for environment driven settings."""

from workout_speech_api.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "LOG_LEVEL", "MAX_TRANSCRIPT_CHARS", "AUTO_ACCEPT_CONFIDENCE", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.ENVIRONMENT == "development"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.MAX_TRANSCRIPT_CHARS == 5000
        assert settings.AUTO_ACCEPT_CONFIDENCE == 0.7
        assert settings.CORS_ORIGINS == ["http://localhost:3000", "http://localhost:3001"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("MAX_TRANSCRIPT_CHARS", "200")
        monkeypatch.setenv("AUTO_ACCEPT_CONFIDENCE", "0.8")
        monkeypatch.setenv("CORS_ORIGINS", "https://app.example.com, https://staging.example.com")
        settings = Settings()
        assert settings.ENVIRONMENT == "production"
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.MAX_TRANSCRIPT_CHARS == 200
        assert settings.AUTO_ACCEPT_CONFIDENCE == 0.8
        assert settings.CORS_ORIGINS == ["https://app.example.com", "https://staging.example.com"]

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "qa")
        monkeypatch.setenv("MAX_TRANSCRIPT_CHARS", "lots")
        monkeypatch.setenv("AUTO_ACCEPT_CONFIDENCE", "high")
        settings = Settings()
        assert settings.ENVIRONMENT == "development"
        assert settings.MAX_TRANSCRIPT_CHARS == 5000
        assert settings.AUTO_ACCEPT_CONFIDENCE == 0.7
