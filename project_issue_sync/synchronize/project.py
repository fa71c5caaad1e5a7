"""Contains resolution logic for the destination project board."""

import structlog

from project_issue_sync.github.abc import ProjectBoardBase
from project_issue_sync.schemas.sync import ProjectModel
from project_issue_sync.synchronize.exceptions import ProjectNotFoundError
from project_issue_sync.utils.constants import PROJECT_CANDIDATE_LIMIT

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def resolve_project(project_board: ProjectBoardBase, org: str, name: str) -> ProjectModel:
    """Resolve a project by name, taking the first candidate GitHub returns.

    There is no fuzzy matching: whatever GitHub ranks first for the query wins.
    """
    candidates = await project_board.find_projects(org, name, first=PROJECT_CANDIDATE_LIMIT)
    if not candidates:
        logger.error("Project not found", org=org, project_name=name)
        raise ProjectNotFoundError(org, name)
    project = candidates[0]
    logger.info("Found project", org=org, project_title=project.title, project_number=project.number, candidate_count=len(candidates))
    return project
