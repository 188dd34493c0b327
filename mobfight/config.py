"""settings for the console fight, read from MOBFIGHT_* environment variables"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """defaults reproduce the classic fight against bob"""

    model_config = SettingsConfigDict(
        env_prefix="MOBFIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    greeting: str = Field(default="Hello World!")
    quit_token: str = Field(default="q", min_length=1)

    player_name: str = Field(default="Me")
    player_atk: int = Field(default=2)
    player_defense: int = Field(default=10)  # stored, never applied

    enemy_name: str = Field(default="bob")
    enemy_hp: int = Field(default=10)
    enemy_atk: int = Field(default=10)
    enemy_defense: int = Field(default=10)

    @field_validator("quit_token")
    @classmethod
    def single_word(cls, value: str) -> str:
        """the quit prompt matches one word per line"""
        if len(value.split()) != 1 or value.strip() != value:
            raise ValueError("quit_token must be a single word with no whitespace")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """return the cached settings, loading them on first use"""
    return Settings()


def clear_settings_cache() -> None:
    get_settings.cache_clear()
