"""Pull request backed by a webhook payload and the review API."""

from enum import Enum

from pydantic import ValidationError

from stylebot.core.exceptions import InvalidPayloadError
from stylebot.core.logging import get_logger
from stylebot.models import Comment, Line
from stylebot.services.pull_request.api import ReviewApi
from stylebot.services.pull_request.schemas import PullRequestEvent

logger = get_logger("pull_request")


class PullRequestState(str, Enum):
    OPENED = "opened"
    SYNCHRONIZED = "synchronized"
    OTHER = "other"

    @classmethod
    def from_action(cls, action: str) -> "PullRequestState":
        if action == "opened":
            return cls.OPENED
        if action == "synchronize":
            return cls.SYNCHRONIZED
        return cls.OTHER


class PullRequest:
    """A pull request under review.

    Existing comments and the head commit's modified lines are fetched
    lazily, once. Comments posted through ``add_comment`` are recorded
    locally so later duplicate checks in the same run see them.
    """

    def __init__(self, event: PullRequestEvent, api: ReviewApi) -> None:
        self.event = event
        self.api = api
        self.state = PullRequestState.from_action(event.action)
        self._comments: list[Comment] | None = None
        self._head_lines: dict[str, list[Line]] | None = None

    @classmethod
    def from_payload(cls, payload: dict, api: ReviewApi) -> "PullRequest":
        """Build a pull request from a raw pull_request webhook payload.

        Raises:
            InvalidPayloadError: If the payload is missing required fields
        """
        try:
            event = PullRequestEvent.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Rejected pull request payload: {e.error_count()} errors")
            raise InvalidPayloadError(details={"errors": e.errors()}) from e
        return cls(event, api)

    @property
    def number(self) -> int:
        return self.event.number

    @property
    def full_repo_name(self) -> str:
        return self.event.full_repo_name

    def opened(self) -> bool:
        return self.state is PullRequestState.OPENED

    def synchronize(self) -> bool:
        return self.state is PullRequestState.SYNCHRONIZED

    @property
    def comments(self) -> list[Comment]:
        if self._comments is None:
            self._comments = list(self.api.pull_request_comments(self.full_repo_name, self.number))
            logger.debug(f"Loaded {len(self._comments)} comments for {self}")
        return self._comments

    def head_includes(self, line: Line, filename: str) -> bool:
        """Check whether the head commit modified the given line of a file."""
        if self._head_lines is None:
            modified = self.api.commit_modified_lines(self.full_repo_name, self.event.head_sha)
            self._head_lines = {name: list(lines) for name, lines in modified.items()}
        return any(line.same_line(head_line) for head_line in self._head_lines.get(filename, []))

    def add_comment(self, filename: str, position: int, body: str) -> None:
        # cache must be loaded before posting
        comments = self.comments
        self.api.add_pull_request_comment(
            self.full_repo_name,
            self.number,
            self.event.head_sha,
            filename,
            position,
            body,
        )
        comments.append(Comment(body=body, position=position, filename=filename))
        logger.info(f"Commented on {self} at {filename}:{position}")

    def __str__(self) -> str:
        return f"{self.full_repo_name}#{self.number}"
