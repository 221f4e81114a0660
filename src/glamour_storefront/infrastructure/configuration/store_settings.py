from enum import StrEnum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackend(StrEnum):
    MEMORY = "memory"
    FILE = "file"
    MONGO = "mongo"


class StoreSettings(BaseSettings):
    store_backend: StoreBackend = Field(default=StoreBackend.MEMORY, alias="STORE_BACKEND")
    runtime_data_dir: Path = Field(default=Path("runtime_data"), alias="RUNTIME_DATA_DIR")
    mongo_url: str = Field(default="mongodb://localhost:27017", alias="MONGO_URL")
    mongo_database: str = Field(default="glamour_storefront", alias="MONGO_DATABASE")
    slug_conflict_max_attempts: int = Field(default=3, ge=1, alias="SLUG_CONFLICT_MAX_ATTEMPTS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
