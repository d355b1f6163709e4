"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the markup scanner."""

    model_config = SettingsConfigDict(
        env_prefix="MARKUP_SCANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base: str = "https://api.github.com"
    user_agent: str = "GitHubMarkupScanner/1.0"
    timeout: float = 30.0
    max_workers: int = 1
    skip_failed: bool = False

    # Substituted for missing CLI arguments only when use_default_args is set
    use_default_args: bool = False
    default_repo_url: str = "https://github.com/ARGOeu/argo-messaging"
    default_search: str = "api.eu.badgr.io"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
