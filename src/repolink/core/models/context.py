"""Editor state passed into a link pipeline."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EditorContext(BaseModel):
    """The active file and cursor position at the time a command runs.

    Lines are 1-based. ``end_line`` marks the end of a selected range and
    only makes sense together with ``line``.
    """

    model_config = ConfigDict(frozen=True)

    file_path: Path
    line: int | None = Field(default=None, ge=1)
    end_line: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_range(self) -> "EditorContext":
        if self.end_line is not None and self.line is None:
            raise ValueError("end_line requires line")
        return self
