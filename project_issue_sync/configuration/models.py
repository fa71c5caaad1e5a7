"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SyncConfig:
    """Configuration class for the sync command."""

    debug: bool
    github_api_url: str
    github_auth_token: str
    gist_id: str
    project_org: str
    project_name: str
    issues_assignee: str
    issues_org: str
    issues_project: str


@dataclass(frozen=True)
class StateConfig:
    """Configuration class for the show-state command."""

    debug: bool
    github_api_url: str
    github_auth_token: str
    gist_id: str
