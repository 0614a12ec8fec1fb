"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    thetaforge_env: str = "development"
    thetaforge_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Simulated image analysis: artificial latency before the canned description
    simulated_analysis_delay_s: float = 1.5
    # Default Stage 4 seed when a request does not provide one (None = random)
    default_seed: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
