from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


# Load .env from the project root directory
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env")


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self) -> None:
        self.app_env: str = os.getenv("APP_ENV", "development")
        self.service_name: str = "simchat"
        self.host: str = os.getenv("SIMCHAT_HOST", "0.0.0.0")
        self.port: int = _int_env("SIMCHAT_PORT", 8000)
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("SIMCHAT_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.random_seed: Optional[int] = _int_env("SIMCHAT_RANDOM_SEED", None)
        self.api_url: str = os.getenv("SIMCHAT_API_URL", "http://localhost:8000")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
