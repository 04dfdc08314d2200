"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be set as ``REPOLINK_<FIELD>``, e.g.
    ``REPOLINK_REPOSITORY_URL=https://github.com/acme/widgets``.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPOLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Linking
    repository_url: str | None = None
    use_commit_hash: bool = False
    host_marker: str = "github.com"  # GitHub Enterprise hosts override this

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
