"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio

from project_issue_sync.configuration import reconcile
from project_issue_sync.configuration.models import StateConfig, SyncConfig


def get_sync_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_auth_token: str | None = None,
    gist_id: str | None = None,
    project_org: str | None = None,
    project_name: str | None = None,
    issues_assignee: str | None = None,
    issues_org: str | None = None,
    issues_project: str | None = None,
) -> SyncConfig:
    """Synchronously get the reconciled sync configuration."""
    return asyncio.run(
        reconcile.reconcile_sync_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_auth_token=github_auth_token,
            cli_gist_id=gist_id,
            cli_project_org=project_org,
            cli_project_name=project_name,
            cli_issues_assignee=issues_assignee,
            cli_issues_org=issues_org,
            cli_issues_project=issues_project,
        )
    )


def get_state_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_auth_token: str | None = None,
    gist_id: str | None = None,
) -> StateConfig:
    """Synchronously get the reconciled show-state configuration."""
    return asyncio.run(
        reconcile.reconcile_state_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_auth_token=github_auth_token,
            cli_gist_id=gist_id,
        )
    )
