from enum import StrEnum
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConflictPolicy(StrEnum):
    """What happens when a batch re-delivers a date that is already stored complete."""

    KEEP_FIRST = "keep_first"
    REPLACE = "replace"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QSVAULT_",
        case_sensitive=False,
    )

    # App
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    api_token: str = ""

    # Vault
    healthkit_dir: Path = Field(default=Path("./vault/healthkit"))
    location_file: Path = Field(default=Path("./vault/location.json"))
    conflict_policy: ConflictPolicy = ConflictPolicy.KEEP_FIRST

    # Tickets
    authorized_author: str = ""

    # GitHub
    github_token: str = Field(
        default="",
        validation_alias=AliasChoices("qsvault_github_token", "github_token"),
    )
    github_repository: str = Field(
        default="",
        validation_alias=AliasChoices("qsvault_github_repository", "github_repository"),
    )
    github_api_url: str = "https://api.github.com"


def get_settings() -> Settings:
    return Settings()
