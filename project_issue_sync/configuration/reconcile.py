"""Reconciles configuration between CLI arguments and environment variables."""

import structlog

from project_issue_sync.configuration.env import Settings
from project_issue_sync.configuration.exceptions import RequiredConfigurationElementError
from project_issue_sync.configuration.models import StateConfig, SyncConfig

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

REQUIRED_ELEMENTS: dict[str, dict[str, str]] = {
    "github_auth_token": {
        "name": "GitHub auth token",
        "env_name": "GITHUB_AUTH_TOKEN",
        "help": "Create a new token with write access to projects.",
    },
    "gist_id": {
        "name": "State gist ID",
        "env_name": "GIST_ID",
        "help": "Create an arbitrary new gist and use the id from the url.",
    },
    "project_org": {
        "name": "Project organization",
        "env_name": "PROJECT_ORG",
        "help": "The GitHub org name of the organization that owns the project.",
    },
    "project_name": {
        "name": "Project name",
        "env_name": "PROJECT_NAME",
        "help": "The name of the project to sync issues to.",
    },
    "issues_assignee": {
        "name": "Issues assignee",
        "env_name": "ISSUES_ASSIGNEE",
        "help": "The GitHub username of the assignee to sync issues for.",
    },
    "issues_org": {
        "name": "Issues organization",
        "env_name": "ISSUES_ORG",
        "help": "The organization to read issues from.",
    },
    "issues_project": {
        "name": "Issues repository",
        "env_name": "ISSUES_PROJECT",
        "help": "The repository to read issues from.",
    },
}


async def reconcile_required_values(cli_values: dict[str, str | None], settings: Settings) -> dict[str, str]:
    """Resolve each required value from the CLI first, then from settings.

    Args:
        cli_values (dict[str, str | None]): Values passed on the command line, keyed by CLI name.
        settings (Settings): Environment and .env file settings used as a fallback.

    Raises:
        RequiredConfigurationElementError: If any value is unset in both places. Every
            missing element is reported, not only the first one.

    Returns:
        dict[str, str]: The resolved values, keyed by CLI name.
    """
    resolved: dict[str, str] = {}
    missing: list[dict[str, str]] = []
    for cli_name, cli_value in cli_values.items():
        element = REQUIRED_ELEMENTS[cli_name]
        value = cli_value or getattr(settings, element["env_name"])
        if not value:
            missing.append({"cli_name": cli_name, **element})
            continue
        resolved[cli_name] = value
    if missing:
        logger.error("Required configuration is missing", missing=[element["env_name"] for element in missing])
        raise RequiredConfigurationElementError(missing)
    return resolved


async def reconcile_sync_configuration(
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_auth_token: str | None = None,
    cli_gist_id: str | None = None,
    cli_project_org: str | None = None,
    cli_project_name: str | None = None,
    cli_issues_assignee: str | None = None,
    cli_issues_org: str | None = None,
    cli_issues_project: str | None = None,
    settings: Settings | None = None,
) -> SyncConfig:
    """Build the configuration for the sync command."""
    settings = settings or Settings()
    values = await reconcile_required_values(
        {
            "github_auth_token": cli_github_auth_token,
            "gist_id": cli_gist_id,
            "project_org": cli_project_org,
            "project_name": cli_project_name,
            "issues_assignee": cli_issues_assignee,
            "issues_org": cli_issues_org,
            "issues_project": cli_issues_project,
        },
        settings,
    )
    return SyncConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        **values,
    )


async def reconcile_state_configuration(
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_auth_token: str | None = None,
    cli_gist_id: str | None = None,
    settings: Settings | None = None,
) -> StateConfig:
    """Build the configuration for the show-state command."""
    settings = settings or Settings()
    values = await reconcile_required_values(
        {"github_auth_token": cli_github_auth_token, "gist_id": cli_gist_id},
        settings,
    )
    return StateConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        **values,
    )
