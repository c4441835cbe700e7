from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Validation
    VALIDATE_ON_VALUE_CHANGE: bool = False  # Default for newly created ValidationSupport instances

    class Config:
        env_file = ".env"
        env_prefix = "FORMVALIDATION_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
