"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    flowangle_env: str = "development"
    flowangle_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Analysis defaults
    default_canvas_size: float = 600.0
    samples_per_curve: int = 100

    # Intersection cost grows with sides squared
    max_sides: int = 64

    # Largest (handle angle x flow factor) grid one /explore request may run
    max_sweep_points: int = 2000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
