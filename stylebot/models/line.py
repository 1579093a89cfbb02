"""A source line located in a pull request diff."""

from pydantic import BaseModel, ConfigDict, Field


class Line(BaseModel):
    """A changed line, by raw line number and by offset in the diff."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)
    # None when the line is not part of the diff
    patch_position: int | None = Field(default=None, ge=1)

    @property
    def in_patch(self) -> bool:
        return self.patch_position is not None

    def same_line(self, other: "Line") -> bool:
        """Compare by raw line number, ignoring the patch position."""
        return self.line_number == other.line_number
