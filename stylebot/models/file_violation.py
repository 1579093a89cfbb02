"""Line violations grouped by file."""

from pydantic import BaseModel, ConfigDict, Field

from stylebot.models.line_violation import LineViolation


class FileViolation(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str = Field(min_length=1)
    line_violations: list[LineViolation] = Field(default_factory=list)
