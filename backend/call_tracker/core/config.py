import json
from functools import lru_cache
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Call Tracker"
    db_path: str = "./call-tracker.db"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: Annotated[List[str], NoDecode] = ["*"]
    static_dir: str = "public"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    def split_origins(cls, value: object) -> object:
        # CORS_ORIGINS is either a JSON list or "a, b"; blank means any origin.
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [origin.strip() for origin in value.split(",") if origin.strip()] or ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
