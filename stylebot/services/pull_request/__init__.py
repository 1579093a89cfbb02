"""Pull request collaborator."""

from stylebot.services.pull_request.api import ReviewApi
from stylebot.services.pull_request.pull_request import PullRequest, PullRequestState
from stylebot.services.pull_request.schemas import PullRequestEvent

__all__ = [
    "PullRequest",
    "PullRequestEvent",
    "PullRequestState",
    "ReviewApi",
]
