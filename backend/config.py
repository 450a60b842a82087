import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _get_list(name: str, fallback: str = "") -> List[str]:
    raw_value = os.getenv(name, fallback)
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str = _require_env("STRIPE_SECRET_KEY")
    firebase_credentials: str | None = os.getenv("FIREBASE_CREDENTIALS")
    firebase_project_id: str | None = os.getenv("FIREBASE_PROJECT_ID")
    default_currency: str = os.getenv("DEFAULT_CURRENCY", "usd")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    allowed_origins: List[str] = field(
        default_factory=lambda: _get_list("ALLOWED_ORIGINS", "*")
    )


settings = Settings()
