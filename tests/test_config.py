"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from stylebot.config import CommentMode, PolicyScope, Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Separate comments and one policy per call by default."""
        for name in ("STYLEBOT_COMMENT_MODE", "STYLEBOT_POLICY_SCOPE", "STYLEBOT_MESSAGE_SEPARATOR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.comment_mode is CommentMode.SEPARATE
        assert settings.policy_scope is PolicyScope.PER_CALL
        assert settings.message_separator == "<br>"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("STYLEBOT_COMMENT_MODE", "joined")
        monkeypatch.setenv("STYLEBOT_POLICY_SCOPE", "per_candidate")
        monkeypatch.setenv("STYLEBOT_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.comment_mode is CommentMode.JOINED
        assert settings.policy_scope is PolicyScope.PER_CANDIDATE
        assert settings.debug is True

    def test_rejects_unknown_mode(self, monkeypatch):
        monkeypatch.setenv("STYLEBOT_COMMENT_MODE", "threaded")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
