"""Hosting repository and remote models."""

from pydantic import BaseModel, ConfigDict, Field


class HostingRepository(BaseModel):
    """A repository on the hosting service, reduced to host/org/repo."""

    model_config = ConfigDict(frozen=True)

    host: str
    org: str
    repo: str

    @property
    def url(self) -> str:
        return f"https://{self.host}/{self.org}/{self.repo}"


class RemoteDescriptor(BaseModel):
    """A named git remote and what its URL normalizes to.

    ``normalized_url`` is None when the raw URL is not recognized as
    belonging to the hosting service.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    normalized_url: str | None = None

    @property
    def recognized(self) -> bool:
        return self.normalized_url is not None


class LineAttribution(BaseModel):
    """The commit that last touched a 1-based line."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    commit: str = Field(min_length=40, max_length=40)
