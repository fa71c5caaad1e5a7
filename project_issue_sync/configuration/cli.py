"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from project_issue_sync.configuration.driver import get_state_config, get_sync_config
from project_issue_sync.configuration.exceptions import RequiredConfigurationElementError
from project_issue_sync.synchronize.driver import get_stored_state, run_sync_workflow
from project_issue_sync.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, no_args_is_help=True)


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_auth_token: Annotated[
        str | None, Option(envvar="GITHUB_AUTH_TOKEN", help="GitHub token with write access to projects and gists.")
    ] = None,
    gist_id: Annotated[str | None, Option(envvar="GIST_ID", help="ID of the gist holding the sync state.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Add open issues assigned to a user to a GitHub project board."""
    ctx.ensure_object(dict)
    ctx.obj["github_api_url"] = github_api_url
    ctx.obj["github_auth_token"] = github_auth_token
    ctx.obj["gist_id"] = gist_id
    ctx.obj["debug"] = debug
    configure_logging(debug)


def echo_missing_configuration(exc: RequiredConfigurationElementError) -> None:
    """Print every missing configuration element to stderr."""
    typer.echo("Missing required configuration:", err=True)
    for line in exc.describe():
        typer.echo(f"  - {line}", err=True)


@typer_app.command(name="sync")
def sync_cli(
    ctx: typer.Context,
    project_org: Annotated[
        str | None, Option(envvar="PROJECT_ORG", help="The GitHub org name of the organization that owns the project.")
    ] = None,
    project_name: Annotated[str | None, Option(envvar="PROJECT_NAME", help="The name of the project to sync issues to.")] = None,
    issues_assignee: Annotated[
        str | None, Option(envvar="ISSUES_ASSIGNEE", help="The GitHub username of the assignee to sync issues for.")
    ] = None,
    issues_org: Annotated[str | None, Option(envvar="ISSUES_ORG", help="The organization to read issues from.")] = None,
    issues_project: Annotated[str | None, Option(envvar="ISSUES_PROJECT", help="The repository to read issues from.")] = None,
) -> None:
    """Add open issues assigned to a user, updated since the last run, to a project."""
    try:
        config = get_sync_config(
            debug=ctx.obj["debug"],
            github_api_url=ctx.obj["github_api_url"],
            github_auth_token=ctx.obj["github_auth_token"],
            gist_id=ctx.obj["gist_id"],
            project_org=project_org,
            project_name=project_name,
            issues_assignee=issues_assignee,
            issues_org=issues_org,
            issues_project=issues_project,
        )
    except RequiredConfigurationElementError as exc:
        echo_missing_configuration(exc)
        raise typer.Exit(1) from exc

    result = asyncio.run(run_sync_workflow(config))

    loop_result = result.issue_synchronization_result
    typer.echo(f'Found project "{result.project.title}".')
    typer.echo(f"Added {len(loop_result.pushed_issues)} issue(s) across {loop_result.pages_fetched} page(s).")
    typer.echo(f"Last synced since: {loop_result.final_cursor or 'never'}")
    typer.echo("Done!")


@typer_app.command(name="show-state")
def show_state_cli(ctx: typer.Context) -> None:
    """Show the stored sync cursor without modifying it."""
    try:
        config = get_state_config(
            debug=ctx.obj["debug"],
            github_api_url=ctx.obj["github_api_url"],
            github_auth_token=ctx.obj["github_auth_token"],
            gist_id=ctx.obj["gist_id"],
        )
    except RequiredConfigurationElementError as exc:
        echo_missing_configuration(exc)
        raise typer.Exit(1) from exc

    state = asyncio.run(get_stored_state(config))
    if state.last_synced_since is None:
        typer.echo("No issues have been synchronized yet.")
    else:
        typer.echo(f"Last synced since: {state.last_synced_since}")


if __name__ == "__main__":
    typer_app()
