"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``GEOSWEEP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOSWEEP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "geosweep"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    epsilon: float = 1e-9

    # Input validation limits
    max_segments: int = 10000
    max_points_per_polyline: int = 500

    # Random segment generator defaults
    generate_count: int = 3
    generate_iterations: int = 100
    generate_min_x: int = 0
    generate_max_x: int = 10
    generate_min_y: int = 0
    generate_max_y: int = 10


@lru_cache
def get_settings() -> Settings:
    return Settings()
