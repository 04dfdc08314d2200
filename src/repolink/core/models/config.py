"""Configuration snapshot for a single link pipeline."""

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from repolink.config.settings import Settings

logger = structlog.get_logger(__name__)

# git lowercases variable names in `git config --get-regex` output
GIT_CONFIG_KEYS = {
    "repositoryurl": "repository_url",
    "usecommithash": "use_commit_hash",
    "hostmarker": "host_marker",
}

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


def parse_bool(value: str) -> bool | None:
    """Parse a git-style boolean, returning None for anything else."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


class LinkConfig(BaseModel):
    """Settings a pipeline reads, frozen for the duration of one command."""

    model_config = ConfigDict(frozen=True)

    repository_url: str | None = None
    use_commit_hash: bool = False
    host_marker: str = Field(default="github.com", min_length=1)

    @classmethod
    def from_sources(
        cls,
        settings: "Settings",
        git_config: dict[str, str] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> "LinkConfig":
        """Merge configuration sources.

        Precedence, highest first: explicit overrides, the repository's
        ``repolink.*`` git config, environment settings.
        """
        values: dict[str, Any] = {
            "repository_url": settings.repository_url or None,
            "use_commit_hash": settings.use_commit_hash,
            "host_marker": settings.host_marker,
        }

        for key, raw in (git_config or {}).items():
            field = GIT_CONFIG_KEYS.get(key.lower())
            if field is None:
                continue
            if field == "use_commit_hash":
                parsed = parse_bool(raw)
                if parsed is None:
                    logger.warning("Ignoring non-boolean git config value", key=key, value=raw)
                    continue
                values[field] = parsed
            elif raw.strip():
                values[field] = raw.strip()

        for key, value in (overrides or {}).items():
            if value is not None:
                values[key] = value

        return cls(**values)
