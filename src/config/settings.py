from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized configuration loaded from environment variables or .env."""

    azure_tenant_id: Optional[str] = Field(None, alias="AZURE_TENANT_ID")
    azure_client_id: Optional[str] = Field(None, alias="AZURE_CLIENT_ID")
    azure_client_secret: Optional[str] = Field(None, alias="AZURE_CLIENT_SECRET")

    servicebus_namespace: Optional[str] = Field(None, alias="SERVICEBUS_FULLY_QUALIFIED_NAMESPACE")
    message_content_type: str = Field("application/json", alias="UNZIP_MESSAGE_CONTENT_TYPE")

    log_level: str = Field("INFO", alias="UNZIP_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_client_secret(self) -> bool:
        return bool(self.azure_tenant_id and self.azure_client_id and self.azure_client_secret)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()  # type: ignore[arg-type]
