"""Pydantic schemas for GitHub pull_request webhook payloads."""

from pydantic import BaseModel, ConfigDict


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CommitRef(_Payload):
    """Head or base reference of a pull request."""

    sha: str


class PullRequestData(_Payload):
    number: int
    head: CommitRef


class Repository(_Payload):
    full_name: str


class PullRequestEvent(_Payload):
    """Fields of a pull_request event used when commenting."""

    action: str
    number: int
    pull_request: PullRequestData
    repository: Repository

    @property
    def head_sha(self) -> str:
        return self.pull_request.head.sha

    @property
    def full_repo_name(self) -> str:
        return self.repository.full_name
