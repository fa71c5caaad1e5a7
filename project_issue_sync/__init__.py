"""Adds issues assigned to a user to a GitHub Projects (v2) board."""

__version__ = "0.1.0"
