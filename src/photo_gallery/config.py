"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

FAVORITES_BACKENDS = {"sqlite", "supabase"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    flickr_api_key: str
    flickr_base_url: str = "https://api.flickr.com/services/rest/"
    favorites_backend: str = "sqlite"
    favorites_db_path: str = "favorites.db"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_favorites_backend(settings: Settings) -> str:
    """Return the normalized favorites backend name, validating it."""
    backend = settings.favorites_backend.strip().lower()
    if backend not in FAVORITES_BACKENDS:
        raise ValueError(f"Unknown favorites backend: {settings.favorites_backend!r}")
    if backend == "supabase" and not (
        settings.supabase_url and settings.supabase_service_key
    ):
        raise ValueError("Supabase favorites backend needs url and service key")
    return backend
