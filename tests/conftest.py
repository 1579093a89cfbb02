"""Shared fixtures for stylebot tests."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def pull_request_payload():
    """Minimal GitHub pull_request webhook payload."""
    return {
        "action": "opened",
        "number": 42,
        "pull_request": {
            "number": 42,
            "title": "Add feature",
            "head": {"sha": "abc123", "ref": "feature"},
            "base": {"sha": "def456", "ref": "main"},
        },
        "repository": {"full_name": "acme/widgets", "name": "widgets", "owner": {"login": "acme"}},
    }


@pytest.fixture
def review_api():
    """Review API double with no existing comments and no head changes."""
    api = Mock()
    api.pull_request_comments.return_value = []
    api.commit_modified_lines.return_value = {}
    return api
