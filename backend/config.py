"""Application configuration via environment variables."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    database_url: str = f"sqlite:///{PROJECT_ROOT / 'analytics.db'}"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]  # Next.js dev server

    # Trade history source: "synthetic" runs the seeded generator, "empty" serves no trades
    trade_source: Literal["synthetic", "empty"] = "synthetic"
    default_trade_count: int = 250
    max_trade_count: int = 1000

    model_config = {"env_prefix": "DA_", "env_file": ".env"}


settings = Settings()
