"""Stylebot services."""
