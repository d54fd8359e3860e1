import os
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent

IS_TEST_MODE = os.getenv("ENV") == "test"


class Settings(BaseSettings):
    log_level: str = "INFO"

    # Часовой пояс для get_today() на стороне вызывающего кода
    timezone: str = "Europe/Moscow"

    class Config:
        env_prefix = "PASSPORT_"
        env_file = BASE_DIR / (".env.test" if IS_TEST_MODE else ".env")
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
