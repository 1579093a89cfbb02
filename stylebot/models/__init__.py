"""Violation and comment value types."""

from stylebot.models.comment import Comment
from stylebot.models.file_violation import FileViolation
from stylebot.models.line import Line
from stylebot.models.line_violation import LineViolation

__all__ = ["Comment", "FileViolation", "Line", "LineViolation"]
