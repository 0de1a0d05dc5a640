"""Shared FastAPI dependencies."""
from src.config.settings import Settings, get_settings


def get_app_settings() -> Settings:
    """Return cached settings instance for FastAPI dependency injection."""
    return get_settings()
