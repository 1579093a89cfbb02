"""Commenter service - posts violations as inline review comments."""

from typing import Iterable, Iterator

from stylebot.config import CommentMode, PolicyScope, settings
from stylebot.core.logging import get_logger
from stylebot.models import Comment, FileViolation, Line, LineViolation
from stylebot.services.commenter.interfaces import (
    CommentPermission,
    PolicyFactory,
    ReviewablePullRequest,
)
from stylebot.services.commenter.policy import CommentingPolicy

logger = get_logger("commenter")


class Commenter:
    """Decide which violations to comment on and post them.

    A line is eligible when the pull request was just opened, or when it
    was synchronized and the head commit touched that line. Each eligible
    candidate must also be permitted by a commenting policy built from
    ``policy_factory``: one per ``comment_on_violations`` call, or one per
    candidate with ``PolicyScope.PER_CANDIDATE``. Policies are created
    lazily, so an empty violation list never builds one.

    Errors raised by the pull request or the policy are not caught.
    """

    def __init__(
        self,
        policy_factory: PolicyFactory = CommentingPolicy,
        policy_scope: PolicyScope | None = None,
        comment_mode: CommentMode | None = None,
    ) -> None:
        self.policy_factory = policy_factory
        self.policy_scope = PolicyScope(policy_scope or settings.policy_scope)
        self.comment_mode = CommentMode(comment_mode or settings.comment_mode)

    def comment_on_violations(
        self,
        file_violations: Iterable[FileViolation],
        pull_request: ReviewablePullRequest,
    ) -> None:
        policy: CommentPermission | None = None
        posted = 0
        skipped = 0

        for file_violation in file_violations:
            filename = file_violation.filename
            for line_violation in file_violation.line_violations:
                line = line_violation.line
                if not self._line_eligible(pull_request, filename, line):
                    logger.debug(f"Skipping {filename}:{line.line_number}, not eligible")
                    skipped += len(line_violation.messages)
                    continue

                for body in self._comment_bodies(line_violation):
                    candidate = Comment(body=body, position=line.patch_position, filename=filename)
                    if policy is None or self.policy_scope is PolicyScope.PER_CANDIDATE:
                        policy = self.policy_factory()

                    if not policy.comment_permitted(pull_request, candidate):
                        logger.debug(f"Policy denied comment on {filename}:{line.line_number}")
                        skipped += 1
                        continue

                    pull_request.add_comment(filename, line.patch_position, body)
                    posted += 1

        if posted or skipped:
            logger.info(f"Posted {posted} comments, skipped {skipped}")

    def _line_eligible(self, pull_request: ReviewablePullRequest, filename: str, line: Line) -> bool:
        if not line.in_patch:
            return False
        if pull_request.opened():
            return True
        if pull_request.synchronize():
            return pull_request.head_includes(line, filename)
        return False

    def _comment_bodies(self, line_violation: LineViolation) -> Iterator[str]:
        if self.comment_mode is CommentMode.JOINED:
            yield settings.message_separator.join(line_violation.messages)
        else:
            yield from line_violation.messages
