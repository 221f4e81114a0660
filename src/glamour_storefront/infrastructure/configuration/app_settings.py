from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # App Config
    app_name: str = Field(default="Glamour Storefront", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    frontend_url: str = Field(default="http://localhost:3000", alias="FRONTEND_URL")

    # Storefront identity (YAML overrides the built-in profile)
    store_profile_path: Path | None = Field(default=None, alias="STORE_PROFILE_PATH")

    # Presentation-layer listing cache
    listing_cache_ttl_s: float = Field(default=30.0, ge=0, alias="LISTING_CACHE_TTL_S")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
