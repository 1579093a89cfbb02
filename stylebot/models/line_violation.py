"""Style violation on a single line."""

from pydantic import BaseModel, ConfigDict, Field

from stylebot.models.line import Line


class LineViolation(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: Line
    messages: list[str] = Field(min_length=1)
