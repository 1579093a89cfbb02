"""Review comment on a pull request, either existing or about to be posted."""

from pydantic import BaseModel, ConfigDict


class Comment(BaseModel):
    """Inline review comment anchored at a patch position."""

    model_config = ConfigDict(frozen=True)

    body: str
    position: int | None = None
    filename: str | None = None

    def duplicates(self, other: "Comment") -> bool:
        """Check whether ``other`` repeats this comment in the same file and position."""
        return (self.filename, self.position, self.body) == (other.filename, other.position, other.body)
