from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from environment variables (or a local .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    database_url: str = Field(
        default="sqlite:///./app.db",
        description="SQLAlchemy URL of the store holding the users table.",
    )
    pokeapi_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        description="Base URL of the upstream Pokemon API.",
    )
    seed_database: bool = Field(
        default=True,
        description="Create the schema and insert the fixed users at startup.",
    )
    log_level: str = "INFO"
    sql_echo: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
