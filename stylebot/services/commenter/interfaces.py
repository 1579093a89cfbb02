"""Collaborator contracts the commenter depends on."""

from typing import Callable, Protocol, Sequence

from stylebot.models import Comment, Line


class ReviewablePullRequest(Protocol):
    """A pull request the commenter can inspect and comment on."""

    @property
    def comments(self) -> Sequence[Comment]: ...

    def opened(self) -> bool: ...

    def synchronize(self) -> bool: ...

    def head_includes(self, line: Line, filename: str) -> bool: ...

    def add_comment(self, filename: str, position: int, body: str) -> None: ...


class CommentPermission(Protocol):
    """Decides whether a candidate comment may be posted."""

    def comment_permitted(self, pull_request: ReviewablePullRequest, candidate: Comment) -> bool: ...


PolicyFactory = Callable[[], CommentPermission]
