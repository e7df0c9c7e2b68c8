# config.py — settings read from the environment / .env
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the bookstore."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    database_url: str = Field(default="sqlite+aiosqlite:///./store.db", validation_alias="DATABASE_URL")
    genres_file: str = Field(default="genres.txt", validation_alias="GENRES_FILE")
    default_image: str = Field(default="/static/imgs/default.svg", validation_alias="DEFAULT_IMAGE")
    static_dir: str = Field(default="static", validation_alias="STATIC_DIR")
    templates_dir: str = Field(default="templates", validation_alias="TEMPLATES_DIR")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(default=True, validation_alias="DEBUG")

    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")


@lru_cache
def get_settings() -> Settings:
    return Settings()
