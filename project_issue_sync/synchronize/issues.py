"""Contains synchronization logic for adding assigned issues to a project."""

import structlog

from project_issue_sync.github.abc import IssueSourceBase, ProjectBoardBase
from project_issue_sync.schemas.sync import IssueModel, ProjectModel
from project_issue_sync.synchronize.results import IssueSynchronizationResult
from project_issue_sync.utils.constants import ISSUES_PAGE_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def add_issue_to_project(project_board: ProjectBoardBase, project: ProjectModel, issue: IssueModel) -> None:
    """Add a single issue to the project board."""
    logger.info("(Re-)adding issue to project", title=issue.title, issue_id=issue.id, updated_at=issue.updated_at)
    item_id = await project_board.add_issue_to_project(project.id, issue.id)
    logger.debug("Issue is on project board", issue_id=issue.id, item_id=item_id)


async def sync_issues_to_project(
    issue_source: IssueSourceBase,
    project_board: ProjectBoardBase,
    project: ProjectModel,
    issues_org: str,
    issues_project: str,
    issues_assignee: str,
    since: str | None,
) -> IssueSynchronizationResult:
    """Page through open assigned issues updated since the cursor and add each one to the project.

    GitHub's `since` filter includes the boundary timestamp, so every page
    starts with the issues of the previous page's last timestamp again.
    Re-adding them is harmless because adding a project item is idempotent.
    The loop stops on an empty page, or when a page does not move the cursor
    forward (all of its issues share the cursor's timestamp).

    The cursor is only returned, never persisted here. Any error from the
    issue source or the project board propagates to the caller.
    """
    cursor = since
    pushed_issues: list[IssueModel] = []
    pages_fetched = 0
    while True:
        issues = await issue_source.list_open_issues_since(
            issues_org,
            issues_project,
            issues_assignee,
            since=cursor,
            first=ISSUES_PAGE_SIZE,
        )
        pages_fetched += 1
        if not issues:
            logger.info("No more issues to synchronize", cursor=cursor, pages_fetched=pages_fetched)
            break
        if issues[-1].updated_at == cursor:
            logger.info("Page made no progress past the cursor", cursor=cursor, page_size=len(issues), pages_fetched=pages_fetched)
            break

        cursor = issues[-1].updated_at
        logger.info("Fetched page of issues", page_size=len(issues), cursor=cursor)
        for issue in issues:
            await add_issue_to_project(project_board, project, issue)
            pushed_issues.append(issue)

    return IssueSynchronizationResult(
        starting_cursor=since,
        final_cursor=cursor,
        pushed_issues=pushed_issues,
        pages_fetched=pages_fetched,
    )
