import pytest

from problem_helper.config import load_settings
from problem_helper.errors import ConfigError


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")
    monkeypatch.setenv("YOUTUBE_API_KEY", "y-key")
    monkeypatch.setenv("TARGET_LANGUAGES", "Python, Go")
    monkeypatch.setenv("ALLOWED_ORIGINS", "chrome-extension://abc,http://localhost:3000")
    settings = load_settings()
    assert settings.gemini_api_key == "g-key"
    assert settings.youtube_api_key == "y-key"
    assert settings.target_languages == ("Python", "Go")
    assert settings.allowed_origins == ("chrome-extension://abc", "http://localhost:3000")


@pytest.mark.parametrize("missing", ["GEMINI_API_KEY", "YOUTUBE_API_KEY"])
def test_load_settings_fails_fast_without_key(monkeypatch, missing):
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")
    monkeypatch.setenv("YOUTUBE_API_KEY", "y-key")
    monkeypatch.setenv(missing, "")
    with pytest.raises(ConfigError, match=missing):
        load_settings()


def test_placeholder_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "PASTE_YOUR_GEMINI_API_KEY_HERE")
    monkeypatch.setenv("YOUTUBE_API_KEY", "y-key")
    with pytest.raises(ConfigError, match="GEMINI_API_KEY"):
        load_settings()
