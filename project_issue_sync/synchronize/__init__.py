"""Synchronization of assigned issues onto a project board."""
