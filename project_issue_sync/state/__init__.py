"""Persistence of the sync cursor between runs."""
