"""Stylebot - posts style violations as pull request review comments."""

__version__ = "0.1.0"
