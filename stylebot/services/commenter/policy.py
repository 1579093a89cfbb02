"""Default commenting policy."""

from stylebot.models import Comment
from stylebot.services.commenter.interfaces import ReviewablePullRequest


class CommentingPolicy:
    """Suppress blank comments and comments that repeat an existing one."""

    def comment_permitted(self, pull_request: ReviewablePullRequest, candidate: Comment) -> bool:
        if not candidate.body.strip():
            return False
        return not any(existing.duplicates(candidate) for existing in pull_request.comments)
