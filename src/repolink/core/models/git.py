"""Result type for git queries."""

from pydantic import BaseModel, ConfigDict


class GitResult(BaseModel):
    """Outcome of a single git invocation.

    Failures are values, not exceptions: callers check ``ok`` or use
    ``value``, which is None for any failed call.
    """

    model_config = ConfigDict(frozen=True)

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def value(self) -> str | None:
        if not self.ok:
            return None
        return self.stdout.strip()
