"""Utility modules for shared functionality."""

from .constants import (
    ISSUES_PAGE_SIZE,
    PROJECT_CANDIDATE_LIMIT,
    STATE_DESCRIPTION,
    STATE_FILE_NAME,
)
from .logging import configure_logging

__all__ = [
    "ISSUES_PAGE_SIZE",
    "PROJECT_CANDIDATE_LIMIT",
    "STATE_DESCRIPTION",
    "STATE_FILE_NAME",
    "configure_logging",
]
