from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHAPEGUARD_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Validation defaults, used when a call passes no options
    ALLOW_EXTRA_PROPERTIES: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
