"""Port for the external code review API."""

from typing import Protocol

from stylebot.models import Comment, Line


class ReviewApi(Protocol):
    """Operations the pull request needs from the hosting service.

    Implementations live outside this package; they own authentication,
    transport and diff parsing.
    """

    def pull_request_comments(self, repo_full_name: str, number: int) -> list[Comment]:
        """List the review comments already on a pull request, each with its filename."""
        ...

    def add_pull_request_comment(
        self,
        repo_full_name: str,
        number: int,
        commit_sha: str,
        filename: str,
        patch_position: int,
        body: str,
    ) -> None:
        """Post an inline comment at a patch position of a file."""
        ...

    def commit_modified_lines(self, repo_full_name: str, commit_sha: str) -> dict[str, list[Line]]:
        """Map each file touched by a commit to the lines it added or changed."""
        ...
