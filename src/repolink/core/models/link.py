"""Resolved link models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LinkKind(str, Enum):
    """What a resolved URL points at."""

    FILE = "file"
    REPOSITORY = "repository"
    PULL_REQUEST = "pull_request"


class ResolvedLink(BaseModel):
    """A URL produced by one command invocation."""

    model_config = ConfigDict(frozen=True)

    kind: LinkKind
    url: str
    ref: str | None = None
    relative_path: str | None = None
    change_request: int | None = None
