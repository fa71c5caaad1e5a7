"""Shared constants used across the application."""

# Remote Query Constants
# ----------------------

ISSUES_PAGE_SIZE = 100
"""Maximum number of issues requested per page (GitHub's GraphQL connection limit)."""

PROJECT_CANDIDATE_LIMIT = 10
"""Number of projects requested when resolving a project by name. The first one is used."""

# State Store Constants
# ---------------------

STATE_FILE_NAME = "add-issues-to-project.json"
"""Name of the gist file holding the sync state."""

STATE_DESCRIPTION = "Project Synchronization State"
"""Gist description written with every state update."""
