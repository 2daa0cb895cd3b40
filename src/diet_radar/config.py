"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_radar.services.normalization import (
    CENTER_FILL_RADIUS,
    SHIFT_FACTOR,
    SHIFT_MIN,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    diet_data_path: str | None = None
    similarity_data_path: str | None = None
    shift_min: float = SHIFT_MIN
    shift_factor: float = SHIFT_FACTOR
    center_fill_radius: float = CENTER_FILL_RADIUS
    view_session_ttl_seconds: int = 3600
    admin_token: str | None = None
    environment: str = _ENVIRONMENT
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
