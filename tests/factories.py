"""Builders for violations and pull request doubles."""

from unittest.mock import Mock

from stylebot.models import Comment, FileViolation, Line, LineViolation
from stylebot.services.pull_request import PullRequest


def make_pull_request(
    opened: bool = False,
    synchronize: bool = False,
    head_includes: bool = False,
    comments: list[Comment] | None = None,
) -> Mock:
    """Build a pull request double with the given state."""
    pull_request = Mock(spec=PullRequest)
    pull_request.opened.return_value = opened
    pull_request.synchronize.return_value = synchronize
    pull_request.head_includes.return_value = head_includes
    pull_request.comments = comments if comments is not None else []
    return pull_request


def make_file_violation(
    filename: str = "test.rb",
    line_number: int = 10,
    patch_position: int | None = 2,
    messages: list[str] | None = None,
) -> FileViolation:
    return FileViolation(
        filename=filename,
        line_violations=[
            LineViolation(
                line=Line(line_number=line_number, patch_position=patch_position),
                messages=messages or ["Trailing whitespace"],
            )
        ],
    )
