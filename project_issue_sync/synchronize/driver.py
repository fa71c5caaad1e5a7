"""Orchestrates the synchronization of assigned issues onto a project board."""

import time

import structlog

from project_issue_sync.configuration.models import StateConfig, SyncConfig
from project_issue_sync.github.adapter import GitHubKitAdapter
from project_issue_sync.schemas.sync import SyncStateModel
from project_issue_sync.state.store import StateStore
from project_issue_sync.synchronize.issues import sync_issues_to_project
from project_issue_sync.synchronize.project import resolve_project
from project_issue_sync.synchronize.results import SyncWorkflowResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_sync_workflow(config: SyncConfig, github_adapter: GitHubKitAdapter | None = None) -> SyncWorkflowResult:
    """Run the sync workflow: resolve the project, page through issues, persist the cursor.

    The new cursor is written only after every page has been processed. If
    any step fails, the stored cursor is left as it was.
    """
    if github_adapter is None:
        github_adapter = await GitHubKitAdapter.create(
            github_auth_token=config.github_auth_token,
            github_api_url=config.github_api_url,
        )

    project = await resolve_project(github_adapter, config.project_org, config.project_name)

    store = StateStore(github_adapter, config.gist_id, SyncStateModel)
    state = await store.load(SyncStateModel())
    logger.info("Starting synchronization", last_synced_since=state.last_synced_since, project_title=project.title)

    start_time = time.time()
    result = await sync_issues_to_project(
        issue_source=github_adapter,
        project_board=github_adapter,
        project=project,
        issues_org=config.issues_org,
        issues_project=config.issues_project,
        issues_assignee=config.issues_assignee,
        since=state.last_synced_since,
    )
    end_time = time.time()
    logger.info(
        "Synchronized issues",
        duration=round(end_time - start_time, 2),
        pages_fetched=result.pages_fetched,
        pushed_issue_count=len(result.pushed_issues),
        starting_cursor=result.starting_cursor,
        final_cursor=result.final_cursor,
    )

    await store.save(SyncStateModel(last_synced_since=result.final_cursor))
    return SyncWorkflowResult(project, result)


async def get_stored_state(config: StateConfig, github_adapter: GitHubKitAdapter | None = None) -> SyncStateModel:
    """Read the stored sync state without modifying it."""
    if github_adapter is None:
        github_adapter = await GitHubKitAdapter.create(
            github_auth_token=config.github_auth_token,
            github_api_url=config.github_api_url,
        )
    store = StateStore(github_adapter, config.gist_id, SyncStateModel)
    return await store.load(SyncStateModel())
