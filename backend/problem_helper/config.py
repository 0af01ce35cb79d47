import os
from dataclasses import dataclass
from typing import List, Tuple

from dotenv import load_dotenv

from .errors import ConfigError

PLACEHOLDER_KEYS = {"PASTE_YOUR_GEMINI_API_KEY_HERE", "PASTE_YOUR_YOUTUBE_API_KEY_HERE"}


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _read_key(name: str) -> str:
    value = os.getenv(name, "").strip()
    if value in PLACEHOLDER_KEYS:
        return ""
    return value


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    youtube_api_key: str
    gemini_model: str = "gemini-1.5-flash"
    gemini_timeout: int = 20
    upstream_timeout: int = 10
    target_languages: Tuple[str, ...] = ("C++", "Java")
    allowed_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    port: int = 8080


def load_settings() -> Settings:
    """Build Settings from the environment (and backend/.env), refusing to start without API keys."""
    load_dotenv()

    gemini_key = _read_key("GEMINI_API_KEY")
    youtube_key = _read_key("YOUTUBE_API_KEY")
    missing = [name for name, value in (("GEMINI_API_KEY", gemini_key), ("YOUTUBE_API_KEY", youtube_key)) if not value]
    if missing:
        raise ConfigError(f"Missing API keys: {', '.join(missing)}. Set them in the environment or backend/.env.")

    languages = tuple(_split_csv(os.getenv("TARGET_LANGUAGES", "C++,Java"))) or ("C++", "Java")
    origins = tuple(_split_csv(os.getenv("ALLOWED_ORIGINS", "*"))) or ("*",)

    return Settings(
        gemini_api_key=gemini_key,
        youtube_api_key=youtube_key,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
        gemini_timeout=int(os.getenv("GEMINI_TIMEOUT_SECONDS", "20")),
        upstream_timeout=int(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10")),
        target_languages=languages,
        allowed_origins=origins,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=int(os.getenv("PORT", "8080")),
    )
