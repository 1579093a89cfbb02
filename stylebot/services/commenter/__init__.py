"""Commenter service."""

from stylebot.services.commenter.policy import CommentingPolicy
from stylebot.services.commenter.service import Commenter

__all__ = ["Commenter", "CommentingPolicy"]
